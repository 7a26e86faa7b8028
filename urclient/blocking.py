"""A single-producer, single-consumer queue with blocking dequeue operations."""

from __future__ import annotations

from typing import Generic, TypeVar

from urclient.rwqueue import DEFAULT_MAX_BLOCK_SIZE, QueueEmpty, ReaderWriterQueue
from urclient.semaphore import LightweightSemaphore

__all__ = ["BlockingReaderWriterQueue"]

T = TypeVar("T")


class BlockingReaderWriterQueue(Generic[T]):
    """Like :class:`ReaderWriterQueue`, but the consumer may wait for elements.

    A semaphore counts the queued elements, so a dequeue only touches the
    inner queue once an element is known to be there.
    """

    def __init__(self, max_size: int = 15, max_block_size: int = DEFAULT_MAX_BLOCK_SIZE) -> None:
        self._inner: ReaderWriterQueue[T] = ReaderWriterQueue(max_size, max_block_size)
        self._sema = LightweightSemaphore()

    def try_enqueue(self, element: T) -> bool:
        """Append ``element`` if there is room; return whether it was added."""
        if self._inner.try_enqueue(element):
            self._sema.signal()
            return True
        return False

    def enqueue(self, element: T) -> None:
        """Append ``element``, adding storage when the queue is full."""
        self._inner.enqueue(element)
        self._sema.signal()

    def try_dequeue(self) -> T:
        """Remove and return the front element; raise QueueEmpty if none."""
        if not self._sema.try_wait():
            raise QueueEmpty("queue is empty")
        return self._inner.try_dequeue()

    def wait_dequeue(self) -> T:
        """Remove and return the front element, waiting until there is one."""
        self._sema.wait()
        return self._inner.try_dequeue()

    def wait_dequeue_timed(self, timeout: float | None) -> T:
        """Remove and return the front element, waiting at most ``timeout`` seconds.

        ``None`` or a negative timeout waits without limit. Raises QueueEmpty
        when the timeout runs out before an element arrives.
        """
        if not self._sema.wait(timeout):
            raise QueueEmpty("timed out waiting for an element")
        return self._inner.try_dequeue()

    def peek(self) -> T:
        """Return the front element without removing it; raise QueueEmpty if none."""
        return self._inner.peek()

    def pop(self) -> bool:
        """Drop the front element; return False if the queue was empty."""
        if self._sema.try_wait():
            return self._inner.pop()
        return False

    def size_approx(self) -> int:
        """Return the number of elements that can be dequeued without waiting."""
        return self._sema.available_approx()

    def __len__(self) -> int:
        return self.size_approx()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size_approx()})"