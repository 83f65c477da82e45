"""Queue repository interface following Black Box Design principles."""
from typing import Protocol


class QueueRepository(Protocol):
    """Protocol for queue storage backends - allows swappable implementations."""

    async def put(self, key: str, value: str) -> None:
        """
        Append a value to the tail of the key's queue.

        Args:
            key: Queue key
            value: Value to enqueue
        """
        ...

    async def get(self, key: str) -> str:
        """
        Remove and return the head of the key's queue without waiting.

        Args:
            key: Queue key

        Returns:
            The oldest queued value

        Raises:
            NotFoundError: Key unknown or its queue is empty
        """
        ...
