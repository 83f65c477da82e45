"""
Queue Module - Black Box Interface

Purpose: Keyed FIFO queues with bounded-wait pop
Interface: QueueModule.put(), QueueModule.get(), parse_wait_budget()
Hidden: Storage backend, locking, retry loop

Backends implement QueueRepository and can be swapped (in-memory, Redis)
without touching the HTTP layer.
"""

from .errors import (
    InternalInconsistencyError,
    InvalidWaitBudgetError,
    NotFoundError,
    QueueError,
    WaitCancelledError,
)
from .interfaces import QueueRepository
from .memory import MemoryQueueRepository
from .queue import QueueModule, parse_wait_budget
from .redis_repo import RedisQueueRepository

__all__ = [
    "QueueModule",
    "QueueRepository",
    "MemoryQueueRepository",
    "RedisQueueRepository",
    "parse_wait_budget",
    "QueueError",
    "NotFoundError",
    "WaitCancelledError",
    "InvalidWaitBudgetError",
    "InternalInconsistencyError",
]
