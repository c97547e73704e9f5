"""Circular singly and doubly linked lists.

Positions are 1-based. Position 1 is the front. Position 0 is the back:
``insert_at(0, v)`` appends and ``delete_at(0)`` removes the last node.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["CircularList", "CircularDoublyList"]


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class _DNode:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _DNode = self
        self.next: _DNode = self


def _check_insert_position(position: int, size: int) -> None:
    if position < 0 or position > size + 1:
        raise IndexError(f"position {position} is out of bounds for {size} items")


def _check_delete_position(position: int, size: int) -> None:
    if size == 0:
        raise IndexError("delete from an empty list")
    if position < 0 or position > size:
        raise IndexError(f"position {position} is out of bounds for {size} items")


class CircularList:
    """A singly linked list whose last node points back to the first."""

    def __init__(self, values: Iterable = ()) -> None:
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_Node]:
        if self._tail is None:
            return
        node = self._tail.next
        for _ in range(self._size):
            yield node
            node = node.next

    def _node_at(self, index: int) -> _Node:
        for i, node in enumerate(self._nodes()):
            if i == index:
                return node
        raise IndexError(index)

    def _push_front(self, value: Any) -> None:
        node = _Node(value)
        if self._tail is None:
            node.next = node
            self._tail = node
        else:
            node.next = self._tail.next
            self._tail.next = node
        self._size += 1

    def _insert_after_node(self, node: _Node, value: Any) -> None:
        if node is self._tail:
            self.append(value)
            return
        node.next = _Node(value, node.next)
        self._size += 1

    def _unlink(self, prev: _Node, node: _Node) -> None:
        if self._size == 1:
            self._tail = None
        else:
            prev.next = node.next
            if node is self._tail:
                self._tail = prev
        self._size -= 1

    def append(self, value: Any) -> None:
        """Add ``value`` at the back."""
        self._push_front(value)
        self._tail = self._tail.next

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert ``value`` after every node holding ``target``."""
        matches = [node for node in self._nodes() if node.value == target]
        if not matches:
            raise ValueError(f"{target!r} is not in the list")
        for node in matches:
            self._insert_after_node(node, value)

    def insert_before(self, target: Any, value: Any) -> None:
        """Insert ``value`` before the first node holding ``target``."""
        if self._tail is None:
            raise ValueError(f"{target!r} is not in the list")
        prev = self._tail
        for _ in range(self._size):
            node = prev.next
            if node.value == target:
                if node is self._tail.next:
                    self._push_front(value)
                else:
                    self._insert_after_node(prev, value)
                return
            prev = node
        raise ValueError(f"{target!r} is not in the list")

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        _check_insert_position(position, self._size)
        if position == 1:
            self._push_front(value)
        elif position == 0 or position == self._size + 1:
            self.append(value)
        else:
            self._insert_after_node(self._node_at(position - 2), value)

    def remove(self, value: Any) -> None:
        """Remove every node holding ``value``."""
        removed = 0
        prev = self._tail
        for _ in range(self._size):
            if self._tail is None:
                break
            node = prev.next
            if node.value == value:
                self._unlink(prev, node)
                removed += 1
            else:
                prev = node
        if not removed:
            raise ValueError(f"{value!r} is not in the list")

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        _check_delete_position(position, self._size)
        index = self._size - 1 if position == 0 else position - 1
        prev = self._tail if index == 0 else self._node_at(index - 1)
        node = prev.next
        self._unlink(prev, node)
        return node.value

    def positions(self, value: Any) -> list[int]:
        """Return the 1-based positions of every node holding ``value``."""
        return [i for i, item in enumerate(self, 1) if item == value]

    def sort(self) -> None:
        """Sort the values in place, ascending."""
        for node, value in zip(list(self._nodes()), sorted(self)):
            node.value = value

    def has_loop(self) -> bool:
        """Return True when following the links comes back round."""
        if self._tail is None:
            return False
        slow = fast = self._tail.next
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def __iter__(self) -> Iterator:
        return (node.value for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularDoublyList:
    """A doubly linked list whose ends are joined in both directions."""

    def __init__(self, values: Iterable = ()) -> None:
        self._head: _DNode | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _nodes(self) -> Iterator[_DNode]:
        node = self._head
        for _ in range(self._size):
            yield node
            node = node.next

    def _node_at(self, index: int) -> _DNode:
        for i, node in enumerate(self._nodes()):
            if i == index:
                return node
        raise IndexError(index)

    def _link_before(self, anchor: _DNode, value: Any) -> _DNode:
        node = _DNode(value)
        node.prev = anchor.prev
        node.next = anchor
        anchor.prev.next = node
        anchor.prev = node
        self._size += 1
        return node

    def _unlink(self, node: _DNode) -> None:
        if self._size == 1:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1

    def _push_front(self, value: Any) -> None:
        self.append(value)
        self._head = self._head.prev

    def append(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if self._head is None:
            self._head = _DNode(value)
            self._size = 1
        else:
            self._link_before(self._head, value)

    def insert_after(self, target: Any, value: Any) -> None:
        """Insert ``value`` after every node holding ``target``."""
        matches = [node for node in self._nodes() if node.value == target]
        if not matches:
            raise ValueError(f"{target!r} is not in the list")
        for node in matches:
            self._link_before(node.next, value)

    def insert_before(self, target: Any, value: Any) -> None:
        """Insert ``value`` before every node holding ``target``."""
        matches = [node for node in self._nodes() if node.value == target]
        if not matches:
            raise ValueError(f"{target!r} is not in the list")
        for node in matches:
            new = self._link_before(node, value)
            if node is self._head:
                self._head = new

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        _check_insert_position(position, self._size)
        if position == 1:
            self._push_front(value)
        elif position == 0 or position == self._size + 1:
            self.append(value)
        else:
            self._link_before(self._node_at(position - 1), value)

    def remove(self, value: Any) -> None:
        """Remove every node holding ``value``."""
        matches = [node for node in self._nodes() if node.value == value]
        if not matches:
            raise ValueError(f"{value!r} is not in the list")
        for node in matches:
            self._unlink(node)

    def delete_at(self, position: int) -> Any:
        """Remove the node at ``position`` and return its value."""
        _check_delete_position(position, self._size)
        node = self._head.prev if position == 0 else self._node_at(position - 1)
        self._unlink(node)
        return node.value

    def positions(self, value: Any) -> list[int]:
        """Return the 1-based positions of every node holding ``value``."""
        return [i for i, item in enumerate(self, 1) if item == value]

    def sort(self) -> None:
        """Sort the values in place, ascending."""
        for node, value in zip(list(self._nodes()), sorted(self)):
            node.value = value

    def reverse(self) -> None:
        """Reverse the order of the nodes in place."""
        if self._head is None:
            return
        for node in list(self._nodes()):
            node.prev, node.next = node.next, node.prev
        self._head = self._head.next

    def has_loop(self) -> bool:
        """Return True when following the links comes back round."""
        if self._head is None:
            return False
        slow = fast = self._head
        while fast is not None and fast.next is not None:
            slow = slow.next
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def __iter__(self) -> Iterator:
        return (node.value for node in self._nodes())

    def __reversed__(self) -> Iterator:
        if self._head is None:
            return
        node = self._head.prev
        for _ in range(self._size):
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"