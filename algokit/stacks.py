"""Bounded array stacks: a single stack and two stacks sharing one array."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["StackOverflow", "StackUnderflow", "Stack", "TwoStacks"]


class StackOverflow(OverflowError):
    """Raised when pushing onto a full stack."""


class StackUnderflow(IndexError):
    """Raised when popping or peeking an empty stack."""


class Stack:
    """A last-in first-out stack holding at most ``capacity`` values."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        if len(self._items) >= self.capacity:
            raise StackOverflow("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Take the top value off and return it."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top value without removing it."""
        if not self._items:
            raise StackUnderflow("stack is empty")
        return self._items[-1]

    def is_palindrome(self) -> bool:
        """Return True when the contents read the same from either end."""
        return self._items == self._items[::-1]

    def __iter__(self) -> Iterator:
        """Yield values from the bottom up."""
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"


class TwoStacks:
    """Two stacks growing towards each other from the ends of one array."""

    def __init__(self, capacity: int = 10) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        self.capacity = capacity
        self._slots: list[Any] = [None] * capacity
        self._top1 = -1
        self._top2 = capacity

    def _has_room(self) -> bool:
        return self._top1 < self._top2 - 1

    def push_first(self, value: Any) -> None:
        """Push ``value`` onto the first stack."""
        if not self._has_room():
            raise StackOverflow("stack 1 is full")
        self._top1 += 1
        self._slots[self._top1] = value

    def push_second(self, value: Any) -> None:
        """Push ``value`` onto the second stack."""
        if not self._has_room():
            raise StackOverflow("stack 2 is full")
        self._top2 -= 1
        self._slots[self._top2] = value

    def pop_first(self) -> Any:
        """Pop and return the top of the first stack."""
        if self._top1 == -1:
            raise StackUnderflow("stack 1 is empty")
        value = self._slots[self._top1]
        self._top1 -= 1
        return value

    def pop_second(self) -> Any:
        """Pop and return the top of the second stack."""
        if self._top2 == self.capacity:
            raise StackUnderflow("stack 2 is empty")
        value = self._slots[self._top2]
        self._top2 += 1
        return value

    def first(self) -> list:
        """Return the first stack's values from the bottom up."""
        return self._slots[: self._top1 + 1]

    def second(self) -> list:
        """Return the second stack's values from the bottom up."""
        return list(reversed(self._slots[self._top2 :]))