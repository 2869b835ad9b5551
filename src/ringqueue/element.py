"""Queue element: an owned string payload carrying its own ring links."""

from ringqueue.linkedlist import Node


class Element(Node):
    """A queue entry. The queue's ring links live directly on the element."""

    __slots__ = ("value",)

    def __init__(self, value: str) -> None:
        super().__init__()
        # Elements start outside any ring
        self.prev = None
        self.next = None
        self.value: str | None = value

    def release(self) -> None:
        """
        Release the owned string, then the element itself.

        The caller must have unlinked the element from every ring first;
        nothing is checked here.
        """
        self.value = None
        self.prev = None
        self.next = None

    def __repr__(self) -> str:
        return f"Element({self.value!r})"
