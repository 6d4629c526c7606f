"""Utility functions for Lumos."""

from .performance import timer
from .retry import RetryConfig, calculate_delay, retry_with_backoff, should_retry
from .similarity import cosine_similarity

__all__ = [
    "cosine_similarity",
    "timer",
    "RetryConfig",
    "calculate_delay",
    "retry_with_backoff",
    "should_retry",
]
