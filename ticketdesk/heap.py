"""Binary max-heap keyed by integer priority."""

from __future__ import annotations

from typing import Any


class Heap:
    """Priority queue in which the highest priority comes out first."""

    def __init__(self) -> None:
        self._entries: list[tuple[int, Any]] = []

    def top(self) -> Any:
        """Return the data with the highest priority, or None if empty."""
        if not self._entries:
            return None
        return self._entries[0][1]

    def push(self, data: Any, priority: int) -> None:
        """Add ``data`` with the given priority."""
        entries = self._entries
        entries.append((priority, data))
        now = len(entries) - 1
        while now > 0 and entries[(now - 1) // 2][0] < priority:
            parent = (now - 1) // 2
            entries[now] = entries[parent]
            now = parent
        entries[now] = (priority, data)

    def pop(self) -> Any:
        """Remove the top element and return its data."""
        entries = self._entries
        if not entries:
            raise IndexError("pop from empty heap")
        top = entries[0][1]
        last = entries.pop()
        if not entries:
            return top
        entries[0] = last
        size = len(entries)
        now = 0
        while True:
            child = 2 * now + 1
            if child >= size:
                break
            if child + 1 < size and entries[child][0] < entries[child + 1][0]:
                child += 1
            if entries[child][0] <= last[0]:
                break
            entries[now], entries[child] = entries[child], entries[now]
            now = child
        return top

    def __len__(self) -> int:
        return len(self._entries)