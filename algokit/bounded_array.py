"""A fixed-capacity array with positional insertion and deletion."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["BoundedArray"]


class BoundedArray:
    """An array holding at most ``capacity`` values, addressed from position 0."""

    def __init__(self, capacity: int = 100, values: Iterable = ()) -> None:
        if capacity < 0:
            raise ValueError("capacity must be non-negative")
        items = list(values)
        if len(items) > capacity:
            raise OverflowError(f"{len(items)} values exceed capacity {capacity}")
        self.capacity = capacity
        self._items = items

    def insert(self, position: int, value: Any) -> None:
        """Insert ``value`` at ``position``, shifting later values right."""
        if len(self._items) >= self.capacity:
            raise OverflowError("array is full")
        if not 0 <= position <= len(self._items):
            raise IndexError(f"position {position} is out of range")
        self._items.insert(position, value)

    def delete(self, position: int) -> Any:
        """Remove and return the value at ``position``, shifting later values left."""
        if not 0 <= position < len(self._items):
            raise IndexError(f"position {position} is out of range")
        return self._items.pop(position)

    def __iter__(self) -> Iterator:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.capacity!r}, {self._items!r})"