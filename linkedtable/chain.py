"""Doubly-linked chain of nodes anchored by two sentinel nodes."""

from __future__ import annotations

from typing import Any, Iterator, Optional

_SENTINEL: Any = object()


class Node:
    """A single key/value node of a :class:`Chain`."""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: Any, value: Any) -> None:
        self.key = key
        self.value = value
        self.prev: Optional[Node] = None
        self.next: Optional[Node] = None

    def __repr__(self) -> str:
        if self.key is _SENTINEL:
            return "Node(<sentinel>)"
        return f"Node({self.key!r}, {self.value!r})"


class Chain:
    """Insertion-ordered list of nodes between a head and a tail sentinel.

    The sentinels never hold data; they guarantee that every real node has
    both a predecessor and a successor.
    """

    __slots__ = ("_head", "_tail")

    def __init__(self) -> None:
        self._head = Node(_SENTINEL, _SENTINEL)
        self._tail = Node(_SENTINEL, _SENTINEL)
        self._reset()

    def _reset(self) -> None:
        self._head.next = self._tail
        self._tail.prev = self._head

    def first(self) -> Optional[Node]:
        """Return the first real node, or ``None`` if the chain is empty."""
        node = self._head.next
        return None if node is self._tail else node

    def last(self) -> Optional[Node]:
        """Return the last real node, or ``None`` if the chain is empty."""
        node = self._tail.prev
        return None if node is self._head else node

    def is_end(self, node: Optional[Node]) -> bool:
        """Return ``True`` if *node* is one of the chain's sentinels."""
        return node is self._head or node is self._tail

    def link_after(self, prev: Node, node: Node) -> None:
        """Insert *node* immediately after *prev*."""
        if prev is self._tail:
            raise ValueError("cannot link a node after the tail sentinel")
        nxt = prev.next
        node.prev = prev
        node.next = nxt
        prev.next = node
        nxt.prev = node

    def append(self, node: Node) -> None:
        """Link *node* at the back of the chain."""
        self.link_after(self._tail.prev, node)

    def prepend(self, node: Node) -> None:
        """Link *node* at the front of the chain."""
        self.link_after(self._head, node)

    def unlink(self, node: Node) -> None:
        """Remove a linked real node from the chain."""
        if self.is_end(node):
            raise ValueError("cannot unlink a sentinel node")
        if node.prev is None or node.next is None:
            raise ValueError("node is not linked")
        node.prev.next = node.next
        node.next.prev = node.prev
        node.prev = None
        node.next = None

    def move_to_back(self, node: Node) -> None:
        """Move a linked node to the back of the chain."""
        self.unlink(node)
        self.append(node)

    def move_to_front(self, node: Node) -> None:
        """Move a linked node to the front of the chain."""
        self.unlink(node)
        self.prepend(node)

    def detach(self) -> Optional[Node]:
        """Empty the chain and return its former first node.

        The detached nodes stay linked to one another through ``next``, so
        a caller that knows how many there were can still walk them.
        """
        front = self.first()
        self._reset()
        return front

    def clear(self) -> None:
        """Remove every node from the chain."""
        node = self._head.next
        while node is not self._tail:
            nxt = node.next
            node.prev = None
            node.next = None
            node = nxt
        self._reset()

    def __iter__(self) -> Iterator[Node]:
        node = self._head.next
        while node is not None and node is not self._tail:
            nxt = node.next
            yield node
            node = nxt

    def __reversed__(self) -> Iterator[Node]:
        node = self._tail.prev
        while node is not None and node is not self._head:
            prv = node.prev
            yield node
            node = prv