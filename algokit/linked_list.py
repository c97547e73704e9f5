"""Singly linked structures: a positional list, a descending ordered list and a stack."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["LinkedList", "OrderedList", "LinkedStack"]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


def _walk(node: _Node | None) -> Iterator[_Node]:
    while node is not None:
        yield node
        node = node.next


class LinkedList:
    """A forward linked list addressed by 1-based positions."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _node_at(self, index: int) -> _Node:
        for i, node in enumerate(_walk(self._head)):
            if i == index:
                return node
        raise IndexError(index)

    def _check_position(self, position: int) -> None:
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is not available in a list of {self._size}")

    def append(self, value: Any) -> None:
        """Add ``value`` at the end."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it occupies an existing ``position``."""
        self._check_position(position)
        if position == 1:
            self._head = _Node(value, self._head)
        else:
            prev = self._node_at(position - 2)
            prev.next = _Node(value, prev.next)
        self._size += 1

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        self._check_position(position)
        if position == 1:
            node = self._head
            self._head = node.next
            if self._head is None:
                self._tail = None
        else:
            prev = self._node_at(position - 2)
            node = prev.next
            prev.next = node.next
            if node is self._tail:
                self._tail = prev
        self._size -= 1
        return node.value

    def clear(self) -> None:
        """Remove every node; an already empty list is an error."""
        if self._size == 0:
            raise IndexError("list is empty")
        self._head = self._tail = None
        self._size = 0

    def reverse(self) -> None:
        """Reverse the links in place, iteratively."""
        prev = None
        current = self._head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = prev
            prev = current
            current = following
        self._head = prev

    def reverse_recursive(self) -> None:
        """Reverse the links in place, recursively."""
        if self._head is None:
            return

        def flip(node: _Node) -> _Node:
            if node.next is None:
                return node
            new_head = flip(node.next)
            node.next.next = node
            node.next = None
            return new_head

        old_head = self._head
        self._head = flip(old_head)
        self._tail = old_head

    def __iter__(self) -> Iterator:
        return (node.value for node in _walk(self._head))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class OrderedList:
    """A linked list that keeps its values in descending order."""

    def __init__(self) -> None:
        self._sentinel = _Node(None)

    def insert(self, value: Any) -> None:
        """Insert ``value`` before the first value not greater than it."""
        prev = self._sentinel
        current = prev.next
        while current is not None and value < current.value:
            prev = current
            current = current.next
        prev.next = _Node(value, current)

    def remove(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        prev = self._sentinel
        current = prev.next
        while current is not None and current.value != value:
            prev = current
            current = current.next
        if current is None:
            raise ValueError(f"{value!r} is not in the list")
        prev.next = current.next

    def __iter__(self) -> Iterator:
        return (node.value for node in _walk(self._sentinel.next))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class LinkedStack:
    """A last-in first-out stack built from linked nodes."""

    def __init__(self) -> None:
        self._top: _Node | None = None
        self._size = 0

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        self._top = _Node(value, self._top)
        self._size += 1

    def pop(self) -> Any:
        """Take the top value off and return it."""
        if self._top is None:
            raise IndexError("stack is empty")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator:
        """Yield values from the top down."""
        return (node.value for node in _walk(self._top))

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"