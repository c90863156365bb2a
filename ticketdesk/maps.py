"""Maps, multimaps and sets built on a cursor linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

from ticketdesk.linked_list import LinkedList

Comparator = Callable[[Any, Any], bool]


@dataclass
class MapPair:
    """A key with its value."""

    key: Any
    value: Any


class Map:
    """Association list keyed by an equality test or an ordering.

    With ``lower_than`` the pairs are kept sorted by key and two keys are
    equal when neither is lower than the other.
    """

    def __init__(
        self,
        is_equal: Optional[Comparator] = None,
        lower_than: Optional[Comparator] = None,
    ) -> None:
        if is_equal is None and lower_than is None:
            raise ValueError("a map needs is_equal or lower_than")
        self._is_equal = is_equal
        self._lower_than = lower_than
        self._pairs = LinkedList()

    def _keys_match(self, pair: MapPair, key: Any) -> bool:
        if self._is_equal is not None and self._is_equal(pair.key, key):
            return True
        lt = self._lower_than
        return lt is not None and not lt(pair.key, key) and not lt(key, pair.key)

    def _add(self, key: Any, value: Any) -> None:
        pair = MapPair(key, value)
        lt = self._lower_than
        if lt is not None:
            self._pairs.sorted_insert(pair, lambda a, b: lt(a.key, b.key))
        else:
            self._pairs.push_back(pair)

    def insert(self, key: Any, value: Any) -> None:
        """Add a pair unless the key is already present."""
        if self.search(key) is not None:
            return
        self._add(key, value)

    def remove(self, key: Any) -> Optional[MapPair]:
        """Remove and return the first pair with ``key``, or None."""
        pair = self._pairs.first()
        while pair is not None:
            if self._keys_match(pair, key):
                self._pairs.pop_current()
                return pair
            pair = self._pairs.next()
        return None

    def search(self, key: Any) -> Optional[MapPair]:
        """Return the first pair with ``key``, or None."""
        pair = self._pairs.first()
        while pair is not None:
            if self._keys_match(pair, key):
                return pair
            pair = self._pairs.next()
        return None

    def first(self) -> Optional[MapPair]:
        """Move the cursor to the first pair and return it."""
        return self._pairs.first()

    def next(self) -> Optional[MapPair]:
        """Advance the cursor and return the pair there."""
        return self._pairs.next()

    def clean(self) -> None:
        """Remove every pair."""
        self._pairs.clean()

    def __iter__(self) -> Iterator[MapPair]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)


class MultiMap(Map):
    """A map that keeps every pair, duplicate keys included."""

    def insert(self, key: Any, value: Any) -> None:
        """Add a pair even when the key is already present."""
        self._add(key, value)


class Set:
    """A collection of distinct values."""

    def __init__(
        self,
        is_equal: Optional[Comparator] = None,
        lower_than: Optional[Comparator] = None,
    ) -> None:
        self._map = Map(is_equal=is_equal, lower_than=lower_than)

    def insert(self, value: Any) -> None:
        """Add ``value`` unless an equal one is present."""
        self._map.insert(value, value)

    def remove(self, value: Any) -> Any:
        """Remove and return the stored value equal to ``value``, or None."""
        pair = self._map.remove(value)
        return None if pair is None else pair.value

    def search(self, value: Any) -> Any:
        """Return the stored value equal to ``value``, or None."""
        pair = self._map.search(value)
        return None if pair is None else pair.value

    def clean(self) -> None:
        """Remove every value."""
        self._map.clean()

    def __len__(self) -> int:
        return len(self._map)