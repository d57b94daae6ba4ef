"""Exponential backoff and retry utilities."""

import asyncio
import logging
import random
from typing import Awaitable, Callable, TypeVar

from twitter_sessions.core.exceptions import RetryExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def exponential_backoff(
    attempt: int,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    jitter: float = 0.1,
) -> float:
    """Calculate delay for exponential backoff with jitter.

    Args:
        attempt: Current attempt number (0-indexed)
        base_delay: Base delay in seconds
        max_delay: Maximum delay cap
        jitter: Jitter factor (0.0 to 1.0)

    Returns:
        Delay in seconds for this attempt
    """
    # base * 2^attempt, capped
    delay = min(base_delay * (2**attempt), max_delay)

    if jitter > 0:
        jitter_amount = delay * jitter
        delay = delay + random.uniform(-jitter_amount, jitter_amount)

    return max(0, delay)


async def retry_async(
    func: Callable[[], Awaitable[T]],
    max_retries: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 30.0,
    jitter: float = 0.1,
    retryable_exceptions: tuple[type[Exception], ...] = (Exception,),
    non_retryable_exceptions: tuple[type[Exception], ...] = (),
) -> T:
    """Await a coroutine factory with retry and exponential backoff.

    With ``max_retries`` of zero or less the factory is awaited exactly
    once and its exception propagates unchanged.

    Args:
        func: Zero-argument callable returning a fresh awaitable per attempt
        max_retries: Maximum number of retry attempts
        base_delay: Base delay between retries
        max_delay: Maximum delay cap
        jitter: Jitter factor for randomization
        retryable_exceptions: Tuple of exception types to retry on
        non_retryable_exceptions: Exception types raised immediately even if
            they match ``retryable_exceptions``

    Returns:
        Result from the first successful attempt

    Raises:
        RetryExhaustedError: If all retry attempts fail
        Exception: If a non-retryable exception occurs
    """
    if max_retries <= 0:
        return await func()

    for attempt in range(max_retries + 1):
        try:
            return await func()
        except non_retryable_exceptions:
            raise
        except retryable_exceptions as e:
            if attempt >= max_retries:
                logger.warning(f"All {max_retries} retry attempts exhausted")
                raise RetryExhaustedError(
                    message=f"All {max_retries} retry attempts exhausted",
                    attempts=attempt + 1,
                    last_error=e,
                    details={"last_error_type": type(e).__name__, "last_error_msg": str(e)},
                ) from e

            delay = exponential_backoff(attempt, base_delay, max_delay, jitter)
            logger.info(f"Attempt {attempt + 1} failed: {e}. Retrying in {delay:.2f}s...")

            await asyncio.sleep(delay)

    # Unreachable: the loop either returns or raises
    raise RetryExhaustedError(
        message="Unexpected retry loop exit",
        attempts=max_retries + 1,
    )
