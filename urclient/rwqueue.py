"""A single-producer, single-consumer FIFO queue built from a ring of blocks."""

from __future__ import annotations

import threading
from typing import Any, Generic, TypeVar

__all__ = ["QueueEmpty", "ReaderWriterQueue", "ceil_to_pow2"]

T = TypeVar("T")

DEFAULT_MAX_BLOCK_SIZE = 512


class QueueEmpty(Exception):
    """Raised when an element is requested from an empty queue."""


def ceil_to_pow2(x: int) -> int:
    """Return the smallest power of two that is not less than ``x``.

    Zero maps to zero, as the unsigned arithmetic it mirrors wraps around.
    """
    if x < 0:
        raise ValueError("x must not be negative")
    if x == 0:
        return 0
    return 1 << (x - 1).bit_length()


def _is_pow2(x: int) -> bool:
    return x > 0 and x & (x - 1) == 0


class _Block:
    """A circular buffer whose size is a power of two; one slot stays unused."""

    __slots__ = ("slots", "front", "tail", "size_mask")

    def __init__(self, size: int) -> None:
        self.slots: list[Any] = [None] * size
        self.front = 0
        self.tail = 0
        self.size_mask = size - 1

    @property
    def is_empty(self) -> bool:
        return self.front == self.tail

    @property
    def is_full(self) -> bool:
        return (self.tail + 1) & self.size_mask == self.front

    @property
    def usable(self) -> int:
        return self.size_mask

    def __len__(self) -> int:
        return (self.tail - self.front) & self.size_mask

    def push(self, element: Any) -> None:
        self.slots[self.tail] = element
        self.tail = (self.tail + 1) & self.size_mask

    def head(self) -> Any:
        return self.slots[self.front]

    def take(self) -> Any:
        element = self.slots[self.front]
        self.slots[self.front] = None
        self.front = (self.front + 1) & self.size_mask
        return element


class ReaderWriterQueue(Generic[T]):
    """FIFO queue for one producer thread and one consumer thread.

    Elements live in a ring of fixed-size blocks. ``try_enqueue`` never adds
    storage and reports whether there was room; ``enqueue`` adds a block
    when the ring is full. Blocks, once added, are kept.
    """

    def __init__(self, max_size: int = 15, max_block_size: int = DEFAULT_MAX_BLOCK_SIZE) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        if not _is_pow2(max_block_size):
            raise ValueError("max_block_size must be a power of 2")
        if max_block_size < 2:
            raise ValueError("max_block_size must be at least 2")

        self._max_block_size = max_block_size
        self._lock = threading.Lock()

        largest = ceil_to_pow2(max_size + 1)
        if largest > max_block_size * 2:
            # A spare block is needed so the producer can fill a whole ring
            # while the consumer still reads from another block.
            block_count = (max_size + max_block_size * 2 - 3) // (max_block_size - 1)
            largest = max_block_size
            self._blocks = [_Block(largest) for _ in range(block_count)]
        else:
            self._blocks = [_Block(largest)]
        self._largest_block_size = largest
        self._front_index = 0
        self._tail_index = 0

    def _next_index(self, index: int) -> int:
        return (index + 1) % len(self._blocks)

    def _enqueue(self, element: T, can_alloc: bool) -> bool:
        with self._lock:
            tail_block = self._blocks[self._tail_index]
            if not tail_block.is_full:
                tail_block.push(element)
                return True

            next_index = self._next_index(self._tail_index)
            if next_index != self._front_index:
                # The block ahead is not the consumer's, so it must be empty.
                next_block = self._blocks[next_index]
                next_block.push(element)
                self._tail_index = next_index
                return True

            if not can_alloc:
                return False

            if self._largest_block_size >= self._max_block_size:
                new_size = self._largest_block_size
            else:
                new_size = self._largest_block_size * 2
            new_block = _Block(new_size)
            new_block.push(element)
            self._largest_block_size = new_size

            insert_at = self._tail_index + 1
            self._blocks.insert(insert_at, new_block)
            if self._front_index >= insert_at:
                self._front_index += 1
            self._tail_index = insert_at
            return True

    def try_enqueue(self, element: T) -> bool:
        """Append ``element`` if there is room; return whether it was added."""
        return self._enqueue(element, can_alloc=False)

    def enqueue(self, element: T) -> None:
        """Append ``element``, adding storage when the queue is full."""
        self._enqueue(element, can_alloc=True)

    def _front_block(self) -> _Block | None:
        """Advance past an exhausted front block; return the block to read."""
        front_block = self._blocks[self._front_index]
        if not front_block.is_empty:
            return front_block
        if self._front_index == self._tail_index:
            return None
        self._front_index = self._next_index(self._front_index)
        return self._blocks[self._front_index]

    def try_dequeue(self) -> T:
        """Remove and return the front element; raise QueueEmpty if none."""
        with self._lock:
            block = self._front_block()
            if block is None:
                raise QueueEmpty("queue is empty")
            return block.take()

    def peek(self) -> T:
        """Return the front element without removing it; raise QueueEmpty if none."""
        with self._lock:
            block = self._front_block()
            if block is None:
                raise QueueEmpty("queue is empty")
            return block.head()

    def pop(self) -> bool:
        """Drop the front element; return False if the queue was empty."""
        with self._lock:
            block = self._front_block()
            if block is None:
                return False
            block.take()
            return True

    def size_approx(self) -> int:
        """Return the number of elements currently queued."""
        with self._lock:
            return sum(len(block) for block in self._blocks)

    def capacity(self) -> int:
        """Return the number of slots in all blocks that may hold elements."""
        with self._lock:
            return sum(block.usable for block in self._blocks)

    def __len__(self) -> int:
        return self.size_approx()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(size={self.size_approx()}, capacity={self.capacity()})"