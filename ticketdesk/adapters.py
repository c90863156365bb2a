"""Queue and stack built on the cursor linked list."""

from __future__ import annotations

from typing import Any

from ticketdesk.linked_list import LinkedList


class Queue:
    """First-in, first-out collection."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def insert(self, data: Any) -> None:
        """Add ``data`` at the back."""
        self._items.push_back(data)

    def remove(self) -> Any:
        """Remove and return the front item, or None if empty."""
        return self._items.pop_front()

    def front(self) -> Any:
        """Return the front item without removing it, or None."""
        return self._items.first()

    def clean(self) -> None:
        """Remove every item."""
        self._items.clean()

    def __len__(self) -> int:
        return len(self._items)


class Stack:
    """Last-in, first-out collection."""

    def __init__(self) -> None:
        self._items = LinkedList()

    def push(self, data: Any) -> None:
        """Put ``data`` on top."""
        self._items.push_front(data)

    def top(self) -> Any:
        """Return the top item without removing it, or None."""
        return self._items.first()

    def pop(self) -> Any:
        """Remove and return the top item, or None if empty."""
        return self._items.pop_front()

    def clean(self) -> None:
        """Remove every item."""
        self._items.clean()

    def __len__(self) -> int:
        return len(self._items)