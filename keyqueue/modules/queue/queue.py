import asyncio
import logging
import math
from typing import Awaitable, Callable, Optional

from .errors import InvalidWaitBudgetError, NotFoundError, WaitCancelledError
from .interfaces import QueueRepository

logger = logging.getLogger(__name__)


def parse_wait_budget(raw: Optional[str]) -> int:
    """
    Parse a wait budget given as text (e.g. a query parameter).

    Args:
        raw: Whole number of seconds, or None/"" for no wait

    Returns:
        Budget in seconds (0 means a single immediate attempt)

    Raises:
        InvalidWaitBudgetError: Not an integer, or negative
    """
    if raw is None or raw == "":
        return 0
    # Plain ASCII digits only: no sign, padding, underscores or other scripts
    if not isinstance(raw, str) or not (raw.isascii() and raw.isdigit()):
        raise InvalidWaitBudgetError(raw)
    return int(raw)


class QueueModule:
    def __init__(self, repository: QueueRepository, retry_interval: float = 1.0):
        """
        Initialize queue module.

        Args:
            repository: Backend implementing put/get single attempts
            retry_interval: Seconds to sleep between attempts while waiting
        """
        if retry_interval <= 0:
            raise ValueError("retry_interval must be positive")
        self.repository = repository
        self.retry_interval = retry_interval

    async def put(self, key: str, value: str) -> None:
        """
        Add value to the tail of key's queue.

        Args:
            key: Queue key
            value: Value to enqueue
        """
        await self.repository.put(key, value)
        logger.debug(f"Queued value under {key!r}")

    async def get(
        self,
        key: str,
        wait: int = 0,
        is_cancelled: Optional[Callable[[], Awaitable[bool]]] = None,
    ) -> str:
        """
        Pop the oldest value for key, optionally waiting for one to arrive.

        Args:
            key: Queue key
            wait: Whole seconds of budget (0 = single immediate attempt)
            is_cancelled: Optional async callback; a true result ends the wait

        Returns:
            The popped value

        Raises:
            NotFoundError: Nothing arrived within the budget
            WaitCancelledError: Caller went away while waiting
            InvalidWaitBudgetError: Negative or non-integer budget

        Logic:
        1. Attempt an immediate pop
        2. On NotFoundError with budget left, sleep one retry interval
        3. Retry until a pop succeeds or the wait seconds are used up

        The repository lock is only held inside each attempt, never across
        the sleep.
        """
        if isinstance(wait, bool) or not isinstance(wait, int) or wait < 0:
            raise InvalidWaitBudgetError(wait)

        # Budget is wall-clock seconds; the interval only sets wake latency
        remaining = math.ceil(wait / self.retry_interval)
        while True:
            try:
                return await self.repository.get(key)
            except NotFoundError:
                if remaining <= 0:
                    raise

            if is_cancelled is not None and await is_cancelled():
                logger.info(f"Wait on {key!r} cancelled with {remaining * self.retry_interval:.2f}s left")
                raise WaitCancelledError(key)

            remaining -= 1
            logger.debug(f"No value for {key!r}, retrying ({remaining * self.retry_interval:.2f}s left)")
            await asyncio.sleep(self.retry_interval)
