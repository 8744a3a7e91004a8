import asyncio
import logging
from typing import Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


async def with_retry(
    fn: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    initial_delay: float = 0.5,
) -> T:
    """Await ``fn()``, retrying with exponential backoff on failure.

    After ``max_attempts`` attempts (including the first) the last
    exception is re-raised. ``max_attempts=1`` means no retry at all.
    """
    delay = initial_delay
    for attempt in range(1, max_attempts + 1):
        try:
            return await fn()
        except Exception as e:
            if attempt >= max_attempts:
                raise
            logger.warning(
                f"Attempt {attempt}/{max_attempts} failed ({e}). Retrying in {delay:.1f}s"
            )
            await asyncio.sleep(delay)
            delay *= 2
    raise RuntimeError("max_attempts must be at least 1")
