"""Exception classes for ringqueue."""


class RingQueueError(Exception):
    """Base exception for all ringqueue errors."""


class QueueFreedError(RingQueueError):
    """Raised when operations are attempted on a queue that has been freed."""


class CorruptRingError(RingQueueError):
    """Raised by Queue.validate() when forward and backward links disagree."""
