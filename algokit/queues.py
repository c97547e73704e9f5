"""Array-backed queues: a linear queue and a circular ring queue."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["QueueFull", "QueueEmpty", "Queue", "CircularQueue"]


class QueueFull(OverflowError):
    """Raised when enqueueing onto a full queue."""


class QueueEmpty(IndexError):
    """Raised when dequeueing from an empty queue."""


class Queue:
    """A linear array queue.

    Slots freed by ``dequeue`` are not reused, so at most ``capacity``
    values can ever be enqueued.
    """

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []
        self._front = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        if len(self._items) >= self.capacity:
            raise QueueFull("queue is full")
        self._items.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._front >= len(self._items):
            raise QueueEmpty("queue is empty")
        value = self._items[self._front]
        self._front += 1
        return value

    def __iter__(self) -> Iterator:
        """Yield values from front to rear."""
        return iter(self._items[self._front :])

    def __len__(self) -> int:
        return len(self._items) - self._front


class CircularQueue:
    """A ring-buffer queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.capacity = capacity
        self._buffer: list[Any] = [None] * capacity
        self._head = 0
        self._count = 0

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the rear, wrapping round the buffer."""
        if self._count == self.capacity:
            raise QueueFull("queue is full")
        self._buffer[(self._head + self._count) % self.capacity] = value
        self._count += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._count == 0:
            raise QueueEmpty("queue is empty")
        value = self._buffer[self._head]
        self._buffer[self._head] = None
        self._head = (self._head + 1) % self.capacity
        self._count -= 1
        return value

    def __iter__(self) -> Iterator:
        """Yield values from front to rear."""
        return iter(
            [self._buffer[(self._head + i) % self.capacity] for i in range(self._count)]
        )

    def __len__(self) -> int:
        return self._count