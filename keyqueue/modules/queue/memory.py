import asyncio
import logging
from collections import deque
from typing import Deque, Dict

from .errors import InternalInconsistencyError, NotFoundError

logger = logging.getLogger(__name__)


class MemoryQueueRepository:
    def __init__(self):
        """
        Initialize an empty in-process repository.

        Queues are created on first put and kept once emptied, so a key
        that has been used stays known for the life of the process.
        """
        self._queues: Dict[str, Deque[str]] = {}
        self._lock = asyncio.Lock()

    async def put(self, key: str, value: str) -> None:
        """
        Append value to the key's queue, creating the queue if needed.

        Args:
            key: Queue key
            value: Value to enqueue
        """
        async with self._lock:
            if key not in self._queues:
                self.create(key, value)
            else:
                self.append(key, value)

    async def get(self, key: str) -> str:
        """
        Pop the oldest value for key (single attempt, no waiting).

        Args:
            key: Queue key

        Returns:
            The value at the head of the queue

        Raises:
            NotFoundError: Key unknown or queue empty
        """
        async with self._lock:
            queue = self._queues.get(key)
            if not queue:
                raise NotFoundError(key)
            return self.pop_head(key)

    def create(self, key: str, value: str) -> None:
        """Insert a new queue holding a single value. Key must be absent."""
        self._queues[key] = deque([value])
        logger.debug(f"Created queue for key {key!r}")

    def append(self, key: str, value: str) -> None:
        """Append to an existing queue."""
        queue = self._queues.get(key)
        if queue is None:
            raise InternalInconsistencyError(f"append on unknown key {key!r}")
        queue.append(value)

    def pop_head(self, key: str) -> str:
        """Remove and return the head of an existing, non-empty queue."""
        queue = self._queues.get(key)
        if not queue:
            raise NotFoundError(key)
        return queue.popleft()
