import logging

from .errors import NotFoundError

logger = logging.getLogger(__name__)


class RedisQueueRepository:
    def __init__(self, redis_client, key_prefix: str = "queue:values:"):
        """
        Initialize Redis-backed repository.

        Args:
            redis_client: Async Redis client (decode_responses=True)
            key_prefix: Prefix for the Redis list holding each queue

        Values are pushed on the right and popped from the left, so each
        list reads oldest-first. Redis drops a list once it is empty; an
        unknown key and a drained key both surface as NotFoundError.
        """
        self.redis = redis_client
        self.key_prefix = key_prefix

    def _queue_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    async def put(self, key: str, value: str) -> None:
        """Append value to the tail of the key's list."""
        await self.redis.rpush(self._queue_key(key), value)

    async def get(self, key: str) -> str:
        """
        Pop the head of the key's list (single attempt).

        Raises:
            NotFoundError: List missing or empty
        """
        value = await self.redis.lpop(self._queue_key(key))
        if value is None:
            raise NotFoundError(key)
        return value
