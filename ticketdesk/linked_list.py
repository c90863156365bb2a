"""Singly linked list with an internal cursor."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any, Optional


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: Any, next: Optional[_Node] = None) -> None:
        self.data = data
        self.next = next


class LinkedList:
    """A singly linked list that keeps a cursor for stepwise traversal.

    Operations that find nothing to return give ``None``.
    """

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._current: Optional[_Node] = None
        self._size = 0

    def first(self) -> Any:
        """Move the cursor to the head and return its data."""
        if self._head is None:
            return None
        self._current = self._head
        return self._current.data

    def next(self) -> Any:
        """Advance the cursor and return its data, or None at the end."""
        if self._current is None or self._current.next is None:
            return None
        self._current = self._current.next
        return self._current.data

    def push_front(self, data: Any) -> None:
        """Insert ``data`` at the head."""
        node = _Node(data, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, data: Any) -> None:
        """Append ``data`` at the tail."""
        node = _Node(data)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def push_current(self, data: Any) -> None:
        """Insert ``data`` right after the cursor; does nothing without a cursor."""
        if self._current is None:
            return
        node = _Node(data, self._current.next)
        self._current.next = node
        if self._current is self._tail:
            self._tail = node
        self._size += 1

    def sorted_insert(self, data: Any, lower_than: Callable[[Any, Any], bool]) -> None:
        """Insert ``data`` before the first element it is lower than."""
        if self._head is None or lower_than(data, self._head.data):
            self.push_front(data)
            return
        node = self._head
        while node.next is not None and not lower_than(data, node.next.data):
            node = node.next
        self._current = node
        self.push_current(data)

    def pop_front(self) -> Any:
        """Remove and return the head's data."""
        node = self._head
        if node is None:
            return None
        self._head = node.next
        if self._head is None:
            self._tail = None
        if self._current is node:
            self._current = self._head
        self._size -= 1
        return node.data

    def pop_back(self) -> Any:
        """Remove and return the tail's data."""
        if self._head is None:
            return None
        if self._head is self._tail:
            return self.pop_front()
        prev = self._head
        while prev.next is not self._tail:
            prev = prev.next
        node = self._tail
        if self._current is node:
            self._current = None
        prev.next = None
        self._tail = prev
        self._size -= 1
        return node.data

    def pop_current(self) -> Any:
        """Remove the cursor's element and return its data; the cursor moves on."""
        node = self._current
        if node is None:
            return None
        if node is self._head:
            return self.pop_front()
        prev = self._head
        while prev is not None and prev.next is not node:
            prev = prev.next
        if prev is None:
            self._current = None
            return None
        prev.next = node.next
        if node is self._tail:
            self._tail = prev
        self._current = prev.next
        self._size -= 1
        return node.data

    def clean(self) -> None:
        """Remove every element."""
        self._head = None
        self._tail = None
        self._current = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next