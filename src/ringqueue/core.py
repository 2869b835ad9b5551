"""Main Queue implementation."""

import logging
from collections.abc import Iterable, Iterator
from typing import cast

from ringqueue.element import Element
from ringqueue.errors import CorruptRingError, QueueFreedError
from ringqueue.linkedlist import Node
from ringqueue.types import End

logger = logging.getLogger(__name__)


class Queue:
    """
    Ordered container of strings on a circular doubly-linked ring.

    A payload-less sentinel anchors the ring. Every mutation is done by
    relinking nodes; values are never copied between elements. The queue is
    meant for exclusive, synchronous use and provides no locking.
    """

    def __init__(self, values: Iterable[str] | None = None) -> None:
        """
        Initialize an empty queue.

        Args:
            values: Optional strings appended in order, as if by insert_tail().
        """
        self._head = Node()
        self._freed = False
        if values is not None:
            for value in values:
                self.insert_tail(value)

    def free(self) -> None:
        """Release every element, then retire the sentinel. Idempotent."""
        if self._freed:
            return
        released = _release_ring(self._head)
        self._freed = True
        logger.debug("Freed queue, released %d elements", released)

    def _check_alive(self, action: str) -> None:
        if self._freed:
            raise QueueFreedError(f"Cannot {action} a freed queue")

    # Basic operations

    def insert(self, value: str | None, *, at: End = "tail") -> bool:
        """
        Insert a copy of value at one end of the queue. O(1).

        Args:
            value: String to store; None and non-str values are rejected
            at: "head" or "tail"

        Returns:
            True on success, False if value is not a str or allocation failed

        Raises:
            QueueFreedError: If the queue has been freed
        """
        self._check_alive("insert into")
        if not isinstance(value, str):
            return False

        try:
            element = Element(value)
        except MemoryError:
            logger.warning("Could not allocate element for insert at %s", at)
            return False

        if at == "head":
            self._head.add(element)
        else:
            self._head.add_tail(element)
        return True

    def insert_head(self, value: str | None) -> bool:
        """Insert a copy of value at the head of the queue."""
        return self.insert(value, at="head")

    def insert_tail(self, value: str | None) -> bool:
        """Insert a copy of value at the tail of the queue."""
        return self.insert(value, at="tail")

    def remove(
        self,
        *,
        at: End = "head",
        sp: bytearray | None = None,
        bufsize: int = 0,
    ) -> Element | None:
        """
        Unlink the element at one end and hand it to the caller. O(1).

        The element is not released; that is the caller's job once it is
        done with it.

        Args:
            at: "head" or "tail"
            sp: Optional output buffer receiving a copy of the removed value
            bufsize: Capacity of sp; at most bufsize - 1 bytes of the UTF-8
                encoded value are copied, followed by a zero byte. sp is
                never grown past its current length.

        Returns:
            The removed element, or None if the queue is empty

        Raises:
            QueueFreedError: If the queue has been freed
        """
        self._check_alive("remove from")
        node = self._head.first if at == "head" else self._head.last
        if node is None:
            return None

        node.unlink()
        element = cast(Element, node)
        capacity = min(bufsize, len(sp)) if sp is not None else 0
        if sp is not None and capacity >= 1:
            data = _value(element).encode()[: capacity - 1]
            sp[: len(data) + 1] = data + b"\x00"
        return element

    def remove_head(self, sp: bytearray | None = None, bufsize: int = 0) -> Element | None:
        """Remove the first element. See remove()."""
        return self.remove(at="head", sp=sp, bufsize=bufsize)

    def remove_tail(self, sp: bytearray | None = None, bufsize: int = 0) -> Element | None:
        """Remove the last element. See remove()."""
        return self.remove(at="tail", sp=sp, bufsize=bufsize)

    def size(self) -> int:
        """Count the elements by walking the ring. O(n)."""
        self._check_alive("measure")
        return sum(1 for _ in self._head)

    # Structural transforms

    def delete_mid(self) -> bool:
        """
        Delete the element at 0-based index n // 2.

        Uses a slow/fast walk: the fast pointer moves two steps per step of
        the slow one and the walk ends when fast reaches the sentinel.

        Returns:
            True if an element was deleted, False if the queue is empty
        """
        self._check_alive("delete from")
        head = self._head
        if head.is_empty():
            return False

        slow = fast = head.next
        while fast is not head and fast.next is not head:
            slow = slow.next
            fast = fast.next.next

        slow.unlink()
        cast(Element, slow).release()
        return True

    def delete_dup(self) -> bool:
        """
        Delete every element whose value occurs more than once.

        No copy of a repeated value is kept; only values that appear exactly
        once survive, in their original order. The queue must already be
        sorted ascending, which is not checked.

        Returns:
            True (the queue handle is always present here)
        """
        self._check_alive("delete from")
        head = self._head
        if head.is_empty():
            return True

        scratch = Node()
        marked = False
        for node in head.iter_safe():
            following = node.next
            if following is not head and _value(node) == _value(following):
                marked = True
                node.move_tail(scratch)
            elif marked:
                # Last copy of a run
                marked = False
                node.move_tail(scratch)

        removed = _release_ring(scratch)
        logger.debug("delete_dup removed %d elements", removed)
        return True

    def swap(self) -> None:
        """Swap every two adjacent elements; a trailing odd element stays put."""
        self._check_alive("swap")
        head = self._head
        node = head.next
        while node is not head and node.next is not head:
            node.next.move(node.prev)
            node = node.next

    def reverse(self) -> None:
        """Reverse the queue in place by swapping every node's links."""
        self._check_alive("reverse")
        head = self._head
        if head.is_empty():
            return

        for node in head.iter_safe():
            node.prev, node.next = node.next, node.prev
        head.prev, head.next = head.next, head.prev

    # Sort engine

    def sort(self) -> None:
        """
        Sort ascending by string comparison with a stable merge sort.

        The ring is cut into a None-terminated chain over next links, sorted
        recursively, and then closed again with prev links rebuilt.
        """
        self._check_alive("sort")
        head = self._head
        if head.is_empty() or head.next is head.prev:
            return

        head.prev.next = None
        chain = head.next
        head.next = None
        chain = _merge_sort(chain)

        count = 0
        tail = head
        node = chain
        while node is not None:
            tail.next = node
            node.prev = tail
            tail = node
            node = node.next
            count += 1
        tail.next = head
        head.prev = tail
        logger.debug("Sorted queue of %d elements", count)

    # Inspection

    def values(self) -> list[str]:
        """Return a snapshot of the stored values, head to tail."""
        return list(self)

    def validate(self) -> None:
        """
        Check the ring invariant in both directions.

        Raises:
            CorruptRingError: If a back-link disagrees with its forward link,
                a member is not a live element, or the two walks differ
            QueueFreedError: If the queue has been freed
        """
        self._check_alive("validate")
        head = self._head

        forward = 0
        node: Node = head
        while True:
            following = node.next
            if following is None or following.prev is not node:
                raise CorruptRingError(f"Broken back-link after position {forward}")
            node = following
            if node is head:
                break
            if not isinstance(node, Element) or node.value is None:
                raise CorruptRingError(f"Position {forward} is not a live element")
            forward += 1

        backward = 0
        node = head
        while True:
            preceding = node.prev
            if preceding is None or preceding.next is not node:
                raise CorruptRingError(f"Broken forward link before position -{backward}")
            node = preceding
            if node is head:
                break
            backward += 1

        if forward != backward:
            raise CorruptRingError(f"Forward walk saw {forward} elements, backward {backward}")

    def __len__(self) -> int:
        """Return the number of elements (same as size())."""
        return self.size()

    def __bool__(self) -> bool:
        """Return True if the queue is non-empty."""
        self._check_alive("inspect")
        return not self._head.is_empty()

    def __iter__(self) -> Iterator[str]:
        """Iterate over the stored values, head to tail."""
        self._check_alive("iterate")
        for node in self._head:
            yield _value(node)

    def __repr__(self) -> str:
        if self._freed:
            return "Queue(<freed>)"
        return f"Queue({self.values()!r})"


def _value(node: Node) -> str:
    return cast(str, cast(Element, node).value)


def _release_ring(head: Node) -> int:
    """Unlink and release every element of a ring. Returns the count."""
    released = 0
    for node in head.iter_safe():
        node.unlink()
        cast(Element, node).release()
        released += 1
    return released


def _merge_sort(chain: Node) -> Node:
    """Sort a None-terminated chain linked through next only."""
    if chain.next is None:
        return chain

    slow, fast = chain, chain.next
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next

    mid = slow.next
    slow.next = None
    return _merge(_merge_sort(chain), _merge_sort(mid))


def _merge(left: Node | None, right: Node | None) -> Node:
    """Merge two sorted chains; on ties the left chain's node comes first."""
    anchor = Node()
    tail = anchor
    while left is not None and right is not None:
        if _value(left) <= _value(right):
            tail.next = left
            left = left.next
        else:
            tail.next = right
            right = right.next
        tail = tail.next

    if left is not None:
        tail.next = left
    else:
        tail.next = right
    return anchor.next
