"""
Exponential backoff for calls to remote embedding APIs.

Usage:
------
    from lumos.utils.retry import RetryConfig, retry_with_backoff

    @retry_with_backoff(max_attempts=4, base_delay=0.5)
    def post_batch(texts):
        return client.post(url, json={"input": texts})
"""

import random
import time
from dataclasses import dataclass
from functools import wraps
from typing import Any, Callable, TypeVar

from loguru import logger

from lumos.errors import PermanentError, RateLimitError, RetryableError, is_retryable

T = TypeVar("T")


@dataclass
class RetryConfig:
    """
    Backoff policy.

    Attributes:
        max_attempts: Total attempts, the first call included
        base_delay: Wait before the first retry (seconds)
        max_delay: Upper bound on any single wait (seconds)
        exponential_base: Growth factor between consecutive waits
        jitter: Random spread as a fraction of the wait (0.0 to 1.0)
        retry_on: Exception types that trigger a retry
        stop_on: Exception types that are never retried
        respect_retry_after: Wait for RateLimitError.retry_after when given
    """

    max_attempts: int = 3
    base_delay: float = 1.0
    max_delay: float = 60.0
    exponential_base: float = 2.0
    jitter: float = 0.1
    retry_on: tuple[type[Exception], ...] = (RetryableError, ConnectionError, OSError)
    stop_on: tuple[type[Exception], ...] = (PermanentError,)
    respect_retry_after: bool = True

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.base_delay < 0:
            raise ValueError("base_delay must be non-negative")
        if self.max_delay < self.base_delay:
            raise ValueError("max_delay must be >= base_delay")
        if not 0 <= self.jitter <= 1:
            raise ValueError("jitter must be between 0 and 1")


def calculate_delay(attempt: int, config: RetryConfig, error: Exception | None = None) -> float:
    """
    Seconds to wait after the given (1-based) failed attempt.

    A rate-limit error carrying Retry-After wins over the exponential
    schedule; either way the result is capped at ``config.max_delay``.
    """
    if (
        config.respect_retry_after
        and isinstance(error, RateLimitError)
        and error.retry_after
        and error.retry_after > 0
    ):
        logger.debug(f"Honouring Retry-After of {error.retry_after}s")
        return min(error.retry_after, config.max_delay)

    delay = config.base_delay * config.exponential_base ** (attempt - 1)
    if config.jitter:
        spread = delay * config.jitter
        delay += random.uniform(-spread, spread)
    return max(0.0, min(delay, config.max_delay))


def should_retry(error: Exception, attempt: int, config: RetryConfig) -> bool:
    if attempt >= config.max_attempts or isinstance(error, config.stop_on):
        return False
    return isinstance(error, config.retry_on) or is_retryable(error)


def retry_with_backoff(
    func: Callable[..., T] | None = None,
    *,
    max_attempts: int = 3,
    base_delay: float = 1.0,
    max_delay: float = 60.0,
    jitter: float = 0.1,
    config: RetryConfig | None = None,
) -> Callable[..., T] | Callable[[Callable[..., T]], Callable[..., T]]:
    """
    Retry the decorated function according to a RetryConfig.

    Works bare (``@retry_with_backoff``) or with arguments; an explicit
    ``config`` takes precedence over the keyword shortcuts. The last error
    is re-raised unchanged once the policy gives up.
    """
    policy = config or RetryConfig(
        max_attempts=max_attempts,
        base_delay=base_delay,
        max_delay=max_delay,
        jitter=jitter,
    )

    def decorator(fn: Callable[..., T]) -> Callable[..., T]:
        @wraps(fn)
        def wrapper(*args: Any, **kwargs: Any) -> T:
            attempt = 1
            while True:
                try:
                    return fn(*args, **kwargs)
                except Exception as e:
                    if not should_retry(e, attempt, policy):
                        logger.error(f"{fn.__name__} failed after {attempt} attempt(s): {type(e).__name__}: {e}")
                        raise

                    delay = calculate_delay(attempt, policy, e)
                    logger.warning(
                        f"{fn.__name__} attempt {attempt}/{policy.max_attempts} failed "
                        f"({type(e).__name__}), retrying in {delay:.2f}s"
                    )
                    time.sleep(delay)
                    attempt += 1

        return wrapper

    if func is not None:
        return decorator(func)
    return decorator
