"""Intrusive circular doubly-linked list primitives for O(1) splicing."""

from collections.abc import Iterator


class Node:
    """
    A link in a circular doubly-linked list.

    A freshly constructed node is a self-closed ring and serves as a sentinel.
    Nodes that carry a payload subclass this type, so a link is its own
    owning element.
    """

    __slots__ = ("prev", "next")

    def __init__(self) -> None:
        self.prev: Node | None = self
        self.next: Node | None = self

    def is_empty(self) -> bool:
        """Return True if this sentinel's ring holds no other nodes."""
        return self.next is self

    @property
    def first(self) -> "Node | None":
        """First node after the sentinel, or None on an empty ring."""
        return None if self.is_empty() else self.next

    @property
    def last(self) -> "Node | None":
        """Last node before the sentinel, or None on an empty ring."""
        return None if self.is_empty() else self.prev

    def add(self, node: "Node") -> None:
        """Link node as the first member of this ring. O(1)."""
        _splice(node, self, self.next)

    def add_tail(self, node: "Node") -> None:
        """Link node as the last member of this ring. O(1)."""
        _splice(node, self.prev, self)

    def unlink(self) -> None:
        """Remove this node from its ring, joining its neighbours. O(1)."""
        if self.prev is not None:
            self.prev.next = self.next
        if self.next is not None:
            self.next.prev = self.prev
        self.prev = None
        self.next = None

    def move(self, head: "Node") -> None:
        """Relocate this node to the front of the ring anchored at head."""
        self.unlink()
        head.add(self)

    def move_tail(self, head: "Node") -> None:
        """Relocate this node to the back of the ring anchored at head."""
        self.unlink()
        head.add_tail(self)

    def __iter__(self) -> Iterator["Node"]:
        """Iterate forward over the ring's nodes, sentinel excluded."""
        node = self.next
        while node is not self and node is not None:
            yield node
            node = node.next

    def iter_safe(self) -> Iterator["Node"]:
        """
        Iterate forward, tolerating removal of the current node.

        The successor is captured before each node is yielded, so the loop
        body may unlink or relocate the node it was handed.
        """
        node = self.next
        while node is not self and node is not None:
            following = node.next
            yield node
            node = following


def _splice(node: Node, prev: Node | None, following: Node | None) -> None:
    """Link node between two adjacent nodes."""
    node.prev = prev
    node.next = following
    if prev is not None:
        prev.next = node
    if following is not None:
        following.prev = node
