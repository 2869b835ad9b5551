"""Tests for the circular doubly-linked list primitives."""

from ringqueue.element import Element
from ringqueue.linkedlist import Node


def _values(head: Node) -> list[str | None]:
    return [node.value for node in head]  # type: ignore[attr-defined]


def test_sentinel_creation() -> None:
    """Test that a new node is a self-closed ring."""
    head = Node()
    assert head.next is head
    assert head.prev is head
    assert head.is_empty()
    assert head.first is None
    assert head.last is None
    assert list(head) == []


def test_add() -> None:
    """Test linking nodes as first member."""
    head = Node()
    a = Element("a")
    b = Element("b")

    head.add(a)
    assert not head.is_empty()
    assert head.first is a
    assert head.last is a

    head.add(b)
    assert _values(head) == ["b", "a"]
    assert head.next is b
    assert b.prev is head
    assert a.next is head
    assert head.prev is a


def test_add_tail() -> None:
    """Test linking nodes as last member."""
    head = Node()
    a = Element("a")
    b = Element("b")

    head.add_tail(a)
    head.add_tail(b)

    assert _values(head) == ["a", "b"]
    assert head.first is a
    assert head.last is b
    assert a.next is b
    assert b.prev is a


def test_unlink() -> None:
    """Test unlinking a middle node joins its neighbours."""
    head = Node()
    nodes = [Element(v) for v in "abc"]
    for node in nodes:
        head.add_tail(node)

    nodes[1].unlink()
    assert _values(head) == ["a", "c"]
    assert nodes[0].next is nodes[2]
    assert nodes[2].prev is nodes[0]


def test_unlink_last_member_empties_ring() -> None:
    """Test unlinking the only member leaves an empty ring."""
    head = Node()
    node = Element("a")
    head.add(node)

    node.unlink()
    assert head.is_empty()
    assert head.prev is head


def test_node_cleanup_after_unlink() -> None:
    """Test that unlinked nodes have their pointers cleared."""
    head = Node()
    node = Element("a")

    head.add_tail(node)
    node.unlink()

    assert node.prev is None
    assert node.next is None


def test_move_between_rings() -> None:
    """Test relocating nodes into another ring."""
    head = Node()
    other = Node()
    nodes = [Element(v) for v in "abcd"]
    for node in nodes:
        head.add_tail(node)

    nodes[1].move(other)
    nodes[3].move(other)
    assert _values(head) == ["a", "c"]
    assert _values(other) == ["d", "b"]

    nodes[0].move_tail(other)
    assert _values(head) == ["c"]
    assert _values(other) == ["d", "b", "a"]


def test_move_within_ring() -> None:
    """Test relocating a node in front of its predecessor."""
    head = Node()
    a = Element("a")
    b = Element("b")
    head.add_tail(a)
    head.add_tail(b)

    b.move(a.prev)  # type: ignore[arg-type]
    assert _values(head) == ["b", "a"]


def test_iter_safe_allows_unlink() -> None:
    """Test that removal-safe iteration survives unlinking every node."""
    head = Node()
    for v in "abcde":
        head.add_tail(Element(v))

    seen = []
    for node in head.iter_safe():
        seen.append(node.value)  # type: ignore[attr-defined]
        node.unlink()

    assert seen == list("abcde")
    assert head.is_empty()


def test_plain_iteration_order() -> None:
    """Test iteration walks head to tail and skips the sentinel."""
    head = Node()
    nodes = [Element(f"key{i}") for i in range(10)]
    for i, node in enumerate(nodes):
        if i % 2 == 0:
            head.add_tail(node)
        else:
            head.add(node)

    expected = [nodes[i] for i in (9, 7, 5, 3, 1, 0, 2, 4, 6, 8)]
    assert list(head) == expected
