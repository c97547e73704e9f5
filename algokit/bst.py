"""An unbalanced binary search tree with in-order iteration."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

__all__ = ["BinarySearchTree"]


class _Node:
    __slots__ = ("value", "left", "right")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.left: _Node | None = None
        self.right: _Node | None = None


class BinarySearchTree:
    """Smaller values go left; equal and larger values go right."""

    def __init__(self) -> None:
        self._root: _Node | None = None
        self._size = 0

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        node = _Node(value)
        self._size += 1
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value < current.value:
                if current.left is None:
                    current.left = node
                    return
                current = current.left
            else:
                if current.right is None:
                    current.right = node
                    return
                current = current.right

    def __iter__(self) -> Iterator:
        """Yield values in ascending (in-order) order."""
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            yield current.value
            current = current.right

    def __len__(self) -> int:
        return self._size