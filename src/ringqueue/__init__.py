"""ringqueue - String queue on an intrusive circular doubly-linked list."""

from ringqueue.api import (
    q_delete_dup,
    q_delete_mid,
    q_free,
    q_insert_head,
    q_insert_tail,
    q_new,
    q_release_element,
    q_remove_head,
    q_remove_tail,
    q_reverse,
    q_size,
    q_sort,
    q_swap,
)
from ringqueue.core import Queue
from ringqueue.element import Element
from ringqueue.errors import CorruptRingError, QueueFreedError, RingQueueError
from ringqueue.linkedlist import Node
from ringqueue.types import End

__version__ = "0.0.1"

__all__ = [
    "Queue",
    "Element",
    "Node",
    "End",
    "RingQueueError",
    "QueueFreedError",
    "CorruptRingError",
    "q_new",
    "q_free",
    "q_insert_head",
    "q_insert_tail",
    "q_remove_head",
    "q_remove_tail",
    "q_release_element",
    "q_size",
    "q_delete_mid",
    "q_delete_dup",
    "q_swap",
    "q_reverse",
    "q_sort",
]
