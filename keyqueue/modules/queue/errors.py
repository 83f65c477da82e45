"""Error taxonomy for the queue module."""


class QueueError(Exception):
    """Base class for queue repository errors."""


class NotFoundError(QueueError):
    """Raised when no value is available for a key.

    Covers unknown keys, known keys whose queue is empty, and bounded waits
    that ran out of budget.
    """

    def __init__(self, key: str):
        super().__init__(f"no value queued under key {key!r}")
        self.key = key


class WaitCancelledError(NotFoundError):
    """Raised when a bounded wait is abandoned because the caller went away."""


class InvalidWaitBudgetError(QueueError, ValueError):
    """Raised when a wait budget is not a non-negative whole number of seconds."""

    def __init__(self, raw):
        super().__init__(f"invalid wait budget: {raw!r}")
        self.raw = raw


class InternalInconsistencyError(QueueError):
    """Raised when a primitive that assumes a known key finds none."""
