"""Insertion-ordered hash set with deque-like operations at both ends."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSet
from typing import Any, Callable, Optional

from linkedtable.chain import Node
from linkedtable.iterators import Drain, NodeIter
from linkedtable.linkedmap import LinkedHashMap


def _element(node: Node) -> Any:
    return node.key


class LinkedHashSet(MutableSet):
    """A hash set that remembers the order in which elements were inserted.

    Inserting an element that is already present is a no-op: it keeps its
    position. Use :meth:`move_to_back` or :meth:`move_to_front` to reorder
    an element explicitly.
    """

    __slots__ = ("_map",)

    def __init__(self, items: Optional[Iterable] = None, capacity: int = 0) -> None:
        self._map = LinkedHashMap(capacity=capacity)
        if items is not None:
            self.extend(items)

    def capacity(self) -> int:
        """Return how many elements the set is sized for."""
        return self._map.capacity()

    def insert_back(self, value: Any) -> bool:
        """Add *value* at the back; return ``True`` if it was newly added."""
        if value in self._map:
            return False
        self._map.insert_back(value, None)
        return True

    def insert_front(self, value: Any) -> bool:
        """Add *value* at the front; return ``True`` if it was newly added."""
        if value in self._map:
            return False
        self._map.insert_front(value, None)
        return True

    def insert(self, value: Any) -> bool:
        """Same as :meth:`insert_back`."""
        return self.insert_back(value)

    def add(self, value: Any) -> None:
        """Add *value* at the back unless it is already present."""
        self.insert_back(value)

    def contains(self, value: Any) -> bool:
        """Return ``True`` if *value* is in the set."""
        return value in self._map

    def __contains__(self, value: object) -> bool:
        return value in self._map

    def get(self, value: Any) -> Any:
        """Return the stored element equal to *value*, or ``None``."""
        pair = self._map.get_key_value(value)
        return None if pair is None else pair[0]

    def front(self) -> Any:
        """Return the oldest element, or ``None`` if the set is empty."""
        pair = self._map.front()
        return None if pair is None else pair[0]

    def back(self) -> Any:
        """Return the newest element, or ``None`` if the set is empty."""
        pair = self._map.back()
        return None if pair is None else pair[0]

    def pop_front(self) -> Any:
        """Remove and return the oldest element, or ``None`` if empty."""
        pair = self._map.pop_front()
        return None if pair is None else pair[0]

    def pop_back(self) -> Any:
        """Remove and return the newest element, or ``None`` if empty."""
        pair = self._map.pop_back()
        return None if pair is None else pair[0]

    def remove(self, value: Any) -> bool:
        """Remove *value*; return ``True`` if it was present."""
        return self._map.remove_entry(value) is not None

    def discard(self, value: Any) -> None:
        """Remove *value* if it is present."""
        self._map.remove_entry(value)

    def take(self, value: Any) -> Any:
        """Remove the element equal to *value* and return it, or ``None``."""
        pair = self._map.remove_entry(value)
        return None if pair is None else pair[0]

    def retain(self, predicate: Callable[[Any], bool]) -> None:
        """Keep only elements for which ``predicate(element)`` is true.

        Elements are visited front to back.
        """
        self._map.retain(lambda key, _value: predicate(key))

    def clear(self) -> None:
        """Remove every element."""
        self._map.clear()

    def move_to_back(self, value: Any) -> bool:
        """Move *value* to the back; return whether it was found."""
        return self._map.move_to_back(value)

    def move_to_front(self, value: Any) -> bool:
        """Move *value* to the front; return whether it was found."""
        return self._map.move_to_front(value)

    def drain(self) -> Drain:
        """Empty the set and return an iterator over its former elements.

        The set is empty as soon as this returns, whether or not the
        iterator is consumed.
        """
        inner = self._map
        length = len(inner)
        inner._index.clear()
        return Drain(inner._chain.detach(), length, _element)

    def is_subset(self, other: Any) -> bool:
        """Return ``True`` if every element of the set is also in *other*."""
        return len(self) <= len(other) and all(v in other for v in self)

    def is_superset(self, other: Any) -> bool:
        """Return ``True`` if every element of *other* is also in the set."""
        return len(other) <= len(self) and all(v in self for v in other)

    def is_disjoint(self, other: Any) -> bool:
        """Return ``True`` if the set and *other* share no elements."""
        if len(self) <= len(other):
            return all(v not in other for v in self)
        return all(v not in self for v in other)

    def iter(self) -> NodeIter:
        """Return a double-ended iterator over elements in insertion order."""
        return self._map.keys()

    def extend(self, items: Iterable) -> None:
        """Insert every element of *items* at the back, in order."""
        for value in items:
            self.insert_back(value)

    def copy(self) -> "LinkedHashSet":
        """Return a shallow copy with the same order."""
        return LinkedHashSet(self, capacity=len(self))

    __copy__ = copy

    def __iter__(self) -> Iterator[Any]:
        return iter(self._map)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __eq__(self, other: object) -> bool:
        """Sets are equal when they hold the same elements in the same order."""
        if not isinstance(other, LinkedHashSet):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "{" + ", ".join(repr(v) for v in self) + "}"