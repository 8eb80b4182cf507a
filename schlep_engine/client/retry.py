"""
Opt-in retry with exponential backoff for Schlep-engine SDK calls.

The SDK never retries on its own; callers that want retries wrap a call:

    ```python
    status = await retry_async(client.status, "job_123", config=RetryConfig(max_retries=5))
    ```

Author: Yobie Benjamin
Date: 2026-10-19
"""

import asyncio
import random
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

from loguru import logger

from schlep_engine.client.exceptions import APIError, RateLimitError, SchlepError, TransportError

T = TypeVar("T")


def is_retryable_error(error: Exception) -> bool:
    """Transport failures, rate limiting and 5xx responses are retryable."""
    if isinstance(error, (TransportError, RateLimitError)):
        return True

    if isinstance(error, APIError):
        return error.status_code >= 500

    return False


@dataclass(frozen=True)
class RetryConfig:
    """
    How often and how long to wait between attempts.

    The server's ``Retry-After`` on a 429 takes precedence over the
    exponential backoff; both are capped at ``max_delay``.
    """
    max_retries: int = 3
    initial_delay: float = 1.0
    max_delay: float = 60.0
    exponential_base: float = 2.0
    jitter: bool = True

    def should_retry(self, error: Exception, attempt: int) -> bool:
        return attempt < self.max_retries and is_retryable_error(error)

    def delay_for(self, attempt: int, error: Exception | None = None) -> float:
        """Seconds to wait after failed attempt ``attempt`` (0-based)."""
        if isinstance(error, RateLimitError) and error.retry_after is not None:
            return min(float(error.retry_after), self.max_delay)

        backoff = min(self.initial_delay * self.exponential_base ** attempt, self.max_delay)
        if self.jitter:
            backoff *= random.uniform(0.5, 1.0)
        return backoff


async def retry_async(
    func: Callable[..., Awaitable[T]],
    *args: Any,
    config: RetryConfig | None = None,
    **kwargs: Any
) -> T:
    """
    Await ``func(*args, **kwargs)``, retrying retryable SDK errors.

    Errors outside the SDK taxonomy, non-retryable SDK errors and the error
    of the last allowed attempt are raised unchanged.
    """
    config = config or RetryConfig()
    attempt = 0

    while True:
        try:
            return await func(*args, **kwargs)
        except SchlepError as e:
            if not config.should_retry(e, attempt):
                raise
            delay = config.delay_for(attempt, e)
            logger.debug(f"Retrying after {type(e).__name__} in {delay:.2f}s (attempt {attempt + 1})")

        await asyncio.sleep(delay)
        attempt += 1
