"""
Functional call surface over Queue.

Every function takes the queue handle first and tolerates it being None,
returning the operation's no-op result instead. This lets a command-driven
driver call each operation independently without guarding every call.
"""

from ringqueue.core import Queue
from ringqueue.element import Element


def q_new() -> Queue | None:
    """Create an empty queue, or return None if it could not be allocated."""
    try:
        return Queue()
    except MemoryError:
        return None


def q_free(q: Queue | None) -> None:
    """Free all storage used by the queue. No-op for None."""
    if q is None:
        return
    q.free()


def q_insert_head(q: Queue | None, s: str | None) -> bool:
    """Insert s at the head. False if q or s is None or allocation failed."""
    if q is None:
        return False
    return q.insert_head(s)


def q_insert_tail(q: Queue | None, s: str | None) -> bool:
    """Insert s at the tail. False if q or s is None or allocation failed."""
    if q is None:
        return False
    return q.insert_tail(s)


def q_remove_head(
    q: Queue | None, sp: bytearray | None = None, bufsize: int = 0
) -> Element | None:
    """Unlink and return the head element, or None if q is None or empty."""
    if q is None:
        return None
    return q.remove_head(sp, bufsize)


def q_remove_tail(
    q: Queue | None, sp: bytearray | None = None, bufsize: int = 0
) -> Element | None:
    """Unlink and return the tail element, or None if q is None or empty."""
    if q is None:
        return None
    return q.remove_tail(sp, bufsize)


def q_release_element(e: Element) -> None:
    """Release an element that is no longer linked into any queue."""
    e.release()


def q_size(q: Queue | None) -> int:
    if q is None:
        return 0
    return q.size()


def q_delete_mid(q: Queue | None) -> bool:
    if q is None:
        return False
    return q.delete_mid()


def q_delete_dup(q: Queue | None) -> bool:
    if q is None:
        return False
    return q.delete_dup()


def q_swap(q: Queue | None) -> None:
    if q is not None:
        q.swap()


def q_reverse(q: Queue | None) -> None:
    if q is not None:
        q.reverse()


def q_sort(q: Queue | None) -> None:
    if q is not None:
        q.sort()
