"""Iterators that walk the nodes of a chain."""

from __future__ import annotations

from typing import Any, Callable, Optional, Tuple

from linkedtable.chain import Node

Projection = Callable[[Node], Any]


class NodeIter:
    """Double-ended, exact-size iterator over a run of linked nodes.

    *project* turns each node into the item that is yielded.
    """

    __slots__ = ("_front", "_back", "_len", "_project")

    def __init__(
        self,
        front: Optional[Node],
        back: Optional[Node],
        length: int,
        project: Projection,
    ) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self._front = front
        self._back = back
        self._len = length
        self._project = project

    def __iter__(self) -> "NodeIter":
        return self

    def __next__(self) -> Any:
        if self._len == 0:
            raise StopIteration
        node = self._front
        self._front = node.next
        self._len -= 1
        return self._project(node)

    def next_back(self) -> Any:
        """Yield the next item from the back; raise StopIteration when done."""
        if self._len == 0:
            raise StopIteration
        node = self._back
        self._back = node.prev
        self._len -= 1
        return self._project(node)

    def __len__(self) -> int:
        return self._len

    def size_hint(self) -> Tuple[int, int]:
        """Return the exact number of remaining items as ``(lower, upper)``."""
        return (self._len, self._len)


class Drain:
    """Iterator that takes ownership of detached nodes and yields them.

    Closing it early discards whatever was not consumed.
    """

    __slots__ = ("_front", "_len", "_project")

    def __init__(self, front: Optional[Node], length: int, project: Projection) -> None:
        if length < 0:
            raise ValueError("length must not be negative")
        self._front = front
        self._len = length
        self._project = project

    def __iter__(self) -> "Drain":
        return self

    def __next__(self) -> Any:
        if self._len == 0:
            raise StopIteration
        node = self._front
        self._front = node.next
        self._len -= 1
        node.prev = None
        node.next = None
        return self._project(node)

    def __len__(self) -> int:
        return self._len

    def size_hint(self) -> Tuple[int, int]:
        """Return the exact number of remaining items as ``(lower, upper)``."""
        return (self._len, self._len)

    def close(self) -> None:
        """Discard every item that has not been yielded yet."""
        node = self._front
        while self._len > 0 and node is not None:
            nxt = node.next
            node.prev = None
            node.next = None
            node = nxt
            self._len -= 1
        self._front = None
        self._len = 0

    def __enter__(self) -> "Drain":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()