"""Logging facade, counting semaphore and single-producer/single-consumer queues."""

__version__ = "0.1.0"
__all__ = ["log", "semaphore", "rwqueue", "blocking"]