"""A counting semaphore with non-blocking, blocking and timed waits."""

from __future__ import annotations

import threading
import time

__all__ = ["LightweightSemaphore"]


class LightweightSemaphore:
    """Counting semaphore meant for one producer and one consumer.

    ``wait`` takes a timeout in seconds. ``None`` or a negative value waits
    without limit, and zero only polls.
    """

    def __init__(self, initial_count: int = 0) -> None:
        if initial_count < 0:
            raise ValueError("initial count must not be negative")
        self._count = int(initial_count)
        self._cond = threading.Condition(threading.Lock())

    def try_wait(self) -> bool:
        """Take one unit if one is available right now; never blocks."""
        with self._cond:
            if self._count > 0:
                self._count -= 1
                return True
            return False

    def wait(self, timeout: float | None = None) -> bool:
        """Take one unit, waiting at most ``timeout`` seconds.

        Returns ``True`` once a unit was taken and ``False`` if the timeout
        ran out first. Without a limit it always returns ``True``.
        """
        with self._cond:
            if self._count > 0:
                self._count -= 1
                return True
            if timeout is None or timeout < 0:
                while self._count <= 0:
                    self._cond.wait()
                self._count -= 1
                return True
            deadline = time.monotonic() + timeout
            while self._count <= 0:
                remaining = deadline - time.monotonic()
                if remaining <= 0:
                    return False
                self._cond.wait(remaining)
            self._count -= 1
            return True

    def signal(self, count: int = 1) -> None:
        """Release ``count`` units and wake waiters."""
        if count < 0:
            raise ValueError("signal count must not be negative")
        if count == 0:
            return
        with self._cond:
            self._count += count
            self._cond.notify(count)

    def available_approx(self) -> int:
        """Return how many units could be taken without blocking."""
        with self._cond:
            return self._count if self._count > 0 else 0

    def __repr__(self) -> str:
        return f"{type(self).__name__}(available={self.available_approx()})"