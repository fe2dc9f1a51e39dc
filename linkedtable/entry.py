"""Entry views for in-place manipulation of a single key of a linked map.

An entry is bound to an *owner*: any object with a ``_chain`` attribute
holding a :class:`~linkedtable.chain.Chain` and an ``_index`` attribute
holding a ``dict`` that maps each key to its node in that chain.
"""

from __future__ import annotations

from typing import Any, Callable, Tuple

from linkedtable.chain import Node


class Entry:
    """A view into a single slot of a map, either occupied or vacant."""

    __slots__ = ()

    def key(self) -> Any:
        """Return the key this entry refers to."""
        raise NotImplementedError

    def or_insert(self, default: Any) -> Any:
        """Insert *default* if the entry is vacant; return the stored value."""
        if isinstance(self, OccupiedEntry):
            return self.get()
        return self.insert(default)

    def or_insert_with(self, factory: Callable[[], Any]) -> Any:
        """Insert ``factory()`` if the entry is vacant; return the stored value.

        *factory* is only called when a value actually has to be inserted.
        """
        if isinstance(self, OccupiedEntry):
            return self.get()
        return self.insert(factory())

    def or_default(self, factory: Callable[[], Any]) -> Any:
        """Insert the default produced by *factory* (e.g. ``int``) if vacant."""
        return self.or_insert_with(factory)

    def and_modify(self, func: Callable[[Any], Any]) -> "Entry":
        """Replace an occupied entry's value with ``func(value)``.

        Vacant entries are left untouched. Returns the entry itself so that
        calls can be chained, e.g. ``entry.and_modify(f).or_insert(0)``.
        """
        if isinstance(self, OccupiedEntry):
            self.insert(func(self.get()))
        return self


class OccupiedEntry(Entry):
    """A view into an entry whose key is present in the map."""

    __slots__ = ("_owner", "_node", "_removed")

    def __init__(self, owner: Any, node: Node) -> None:
        self._owner = owner
        self._node = node
        self._removed = False

    def _live_node(self) -> Node:
        if self._removed:
            raise RuntimeError("entry has already been removed from the map")
        return self._node

    def key(self) -> Any:
        """Return the key stored in the entry."""
        return self._node.key

    def get(self) -> Any:
        """Return the value stored in the entry."""
        return self._live_node().value

    def insert(self, value: Any) -> Any:
        """Replace the entry's value and return the old one."""
        node = self._live_node()
        old = node.value
        node.value = value
        return old

    def remove(self) -> Any:
        """Remove the entry from the map and return its value."""
        return self.remove_entry()[1]

    def remove_entry(self) -> Tuple[Any, Any]:
        """Remove the entry from the map and return ``(key, value)``."""
        node = self._live_node()
        owner = self._owner
        if owner._index.get(node.key) is not node:
            raise RuntimeError("entry no longer belongs to its map")
        del owner._index[node.key]
        owner._chain.unlink(node)
        self._removed = True
        return node.key, node.value

    def __repr__(self) -> str:
        return f"OccupiedEntry({self._node.key!r}, {self._node.value!r})"


class VacantEntry(Entry):
    """A view into an entry whose key is absent from the map."""

    __slots__ = ("_owner", "_key", "_used")

    def __init__(self, owner: Any, key: Any) -> None:
        self._owner = owner
        self._key = key
        self._used = False

    def key(self) -> Any:
        """Return the key that would be used when inserting."""
        return self._key

    def into_key(self) -> Any:
        """Give the key back without inserting anything."""
        return self._key

    def insert(self, value: Any) -> Any:
        """Insert *value* at the back of the map and return it."""
        if self._used:
            raise RuntimeError("vacant entry has already been filled")
        owner = self._owner
        if self._key in owner._index:
            raise RuntimeError("key was inserted into the map after this entry was made")
        node = Node(self._key, value)
        owner._chain.append(node)
        owner._index[self._key] = node
        self._used = True
        return value

    def __repr__(self) -> str:
        return f"VacantEntry({self._key!r})"