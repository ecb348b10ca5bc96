"""Retry helper for calls to external services.

The backend API client never retries; this is used only where a caller
explicitly opts in (the image provider call in the proxy app).
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable

logger = logging.getLogger(__name__)

DEFAULT_ATTEMPTS = 2
DEFAULT_BASE_DELAY = 0.2  # seconds


def backoff_delay(attempt: int, base_delay: float = DEFAULT_BASE_DELAY) -> float:
    """Delay before the retry that follows zero-indexed `attempt`."""
    return base_delay * (2**attempt)


async def with_retry[T](
    fn: Callable[[], Awaitable[T]],
    attempts: int = DEFAULT_ATTEMPTS,
    exceptions: tuple[type[Exception], ...] = (Exception,),
    base_delay: float = DEFAULT_BASE_DELAY,
    operation: str = "operation",
) -> T:
    """Run `fn`, retrying with exponential backoff on the given exceptions.

    Args:
        fn: Zero-argument coroutine factory
        attempts: Maximum number of attempts (1 disables retrying)
        exceptions: Exception types that trigger a retry
        base_delay: Base delay in seconds for exponential backoff
        operation: Name used in log messages

    Returns:
        Result of the first successful call

    Raises:
        The last exception if all attempts fail
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    for attempt in range(attempts):
        try:
            return await fn()
        except exceptions as e:
            if attempt == attempts - 1:
                raise
            delay = backoff_delay(attempt, base_delay)
            logger.warning(
                "%s failed (%s), retrying in %.2fs (attempt %d/%d)",
                operation,
                type(e).__name__,
                delay,
                attempt + 1,
                attempts,
            )
            await asyncio.sleep(delay)

    raise AssertionError("unreachable")
