"""Insertion-ordered hash map with deque-like operations at both ends."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from typing import Any, Callable, Optional, Tuple

from linkedtable.chain import Chain, Node
from linkedtable.entry import Entry, OccupiedEntry, VacantEntry
from linkedtable.iterators import Drain, NodeIter


def _pair(node: Node) -> Tuple[Any, Any]:
    return node.key, node.value


def _key(node: Node) -> Any:
    return node.key


def _value(node: Node) -> Any:
    return node.value


class LinkedHashMap(MutableMapping):
    """A hash map that remembers the order in which keys were inserted.

    New keys can be added at either end, and entries can be popped from
    either end. Re-inserting an existing key replaces its value in place and
    keeps its position; use :meth:`move_to_back` or :meth:`move_to_front`
    to reorder an entry explicitly.
    """

    __slots__ = ("_chain", "_index", "_capacity")

    def __init__(self, items: Any = None, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._chain = Chain()
        self._index: dict = {}
        self._capacity = capacity
        if items is not None:
            self.extend(items)

    def capacity(self) -> int:
        """Return how many entries the map is sized for."""
        return max(self._capacity, len(self._index))

    def entry(self, key: Any) -> Entry:
        """Return an entry view of *key* for in-place manipulation."""
        node = self._index.get(key)
        if node is not None:
            return OccupiedEntry(self, node)
        return VacantEntry(self, key)

    def _insert(self, key: Any, value: Any, link: Callable[[Node], None]) -> Any:
        node = self._index.get(key)
        if node is not None:
            old = node.value
            node.value = value
            return old
        node = Node(key, value)
        link(node)
        self._index[key] = node
        return None

    def insert_back(self, key: Any, value: Any) -> Any:
        """Add *key* at the back, or update it in place if it exists.

        Returns the previous value of an existing key, otherwise ``None``.
        """
        return self._insert(key, value, self._chain.append)

    def insert_front(self, key: Any, value: Any) -> Any:
        """Add *key* at the front, or update it in place if it exists.

        Returns the previous value of an existing key, otherwise ``None``.
        """
        return self._insert(key, value, self._chain.prepend)

    def insert(self, key: Any, value: Any) -> Any:
        """Same as :meth:`insert_back`."""
        return self.insert_back(key, value)

    def get(self, key: Any, default: Any = None) -> Any:
        """Return the value for *key*, or *default* if it is absent."""
        node = self._index.get(key)
        return default if node is None else node.value

    def get_key_value(self, key: Any) -> Optional[Tuple[Any, Any]]:
        """Return the stored ``(key, value)`` pair for *key*, or ``None``."""
        node = self._index.get(key)
        return None if node is None else (node.key, node.value)

    def contains_key(self, key: Any) -> bool:
        """Return ``True`` if the map holds a value for *key*."""
        return key in self._index

    def __contains__(self, key: object) -> bool:
        return key in self._index

    def front(self) -> Optional[Tuple[Any, Any]]:
        """Return the oldest ``(key, value)`` pair, or ``None`` if empty."""
        node = self._chain.first()
        return None if node is None else (node.key, node.value)

    def back(self) -> Optional[Tuple[Any, Any]]:
        """Return the newest ``(key, value)`` pair, or ``None`` if empty."""
        node = self._chain.last()
        return None if node is None else (node.key, node.value)

    def _remove_node(self, node: Node) -> Tuple[Any, Any]:
        del self._index[node.key]
        self._chain.unlink(node)
        return node.key, node.value

    def pop_front(self) -> Optional[Tuple[Any, Any]]:
        """Remove and return the oldest ``(key, value)`` pair, or ``None``."""
        node = self._chain.first()
        return None if node is None else self._remove_node(node)

    def pop_back(self) -> Optional[Tuple[Any, Any]]:
        """Remove and return the newest ``(key, value)`` pair, or ``None``."""
        node = self._chain.last()
        return None if node is None else self._remove_node(node)

    def remove(self, key: Any) -> Any:
        """Remove *key* and return its value, or ``None`` if absent."""
        pair = self.remove_entry(key)
        return None if pair is None else pair[1]

    def remove_entry(self, key: Any) -> Optional[Tuple[Any, Any]]:
        """Remove *key* and return the stored ``(key, value)``, or ``None``."""
        node = self._index.get(key)
        return None if node is None else self._remove_node(node)

    def retain(self, predicate: Callable[[Any, Any], bool]) -> None:
        """Keep only entries for which ``predicate(key, value)`` is true.

        Entries are visited front to back.
        """
        for node in self._chain:
            if not predicate(node.key, node.value):
                self._remove_node(node)

    def clear(self) -> None:
        """Remove every entry."""
        self._chain.clear()
        self._index.clear()

    def move_to_back(self, key: Any) -> bool:
        """Move *key* to the back; return whether it was found."""
        node = self._index.get(key)
        if node is None:
            return False
        self._chain.move_to_back(node)
        return True

    def move_to_front(self, key: Any) -> bool:
        """Move *key* to the front; return whether it was found."""
        node = self._index.get(key)
        if node is None:
            return False
        self._chain.move_to_front(node)
        return True

    def drain(self) -> Drain:
        """Empty the map and return an iterator over its former pairs.

        The map is empty as soon as this returns, whether or not the
        iterator is consumed.
        """
        length = len(self._index)
        self._index.clear()
        return Drain(self._chain.detach(), length, _pair)

    def _walk(self, project: Callable[[Node], Any]) -> NodeIter:
        return NodeIter(self._chain.first(), self._chain.last(), len(self._index), project)

    def items(self) -> NodeIter:
        """Iterate over ``(key, value)`` pairs in insertion order."""
        return self._walk(_pair)

    def keys(self) -> NodeIter:
        """Iterate over keys in insertion order."""
        return self._walk(_key)

    def values(self) -> NodeIter:
        """Iterate over values in insertion order."""
        return self._walk(_value)

    def extend(self, items: Any) -> None:
        """Insert every pair of *items* at the back, in order.

        *items* is a mapping or an iterable of ``(key, value)`` pairs.
        """
        pairs: Iterable = items.items() if isinstance(items, Mapping) else items
        for key, value in pairs:
            self.insert_back(key, value)

    def copy(self) -> "LinkedHashMap":
        """Return a shallow copy with the same order."""
        return LinkedHashMap(self.items(), capacity=len(self))

    __copy__ = copy

    def __iter__(self) -> Iterator[Any]:
        return (node.key for node in self._chain)

    def __reversed__(self) -> Iterator[Any]:
        return (node.key for node in reversed(self._chain))

    def __len__(self) -> int:
        return len(self._index)

    def __getitem__(self, key: Any) -> Any:
        node = self._index.get(key)
        if node is None:
            raise KeyError(f"key not found: {key!r}")
        return node.value

    def __setitem__(self, key: Any, value: Any) -> None:
        self.insert_back(key, value)

    def __delitem__(self, key: Any) -> None:
        if self.remove_entry(key) is None:
            raise KeyError(f"key not found: {key!r}")

    def __eq__(self, other: object) -> bool:
        """Maps are equal when they hold the same pairs in the same order."""
        if not isinstance(other, LinkedHashMap):
            return NotImplemented
        if len(self) != len(other):
            return False
        return all(
            k1 == k2 and v1 == v2
            for (k1, v1), (k2, v2) in zip(self.items(), other.items())
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        body = ", ".join(f"{k!r}: {v!r}" for k, v in self.items())
        return "{" + body + "}"