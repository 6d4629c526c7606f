"""Timing helper for ingestion steps."""

import time
from contextlib import contextmanager

from loguru import logger


@contextmanager
def timer(operation: str, log_level: str = "INFO", threshold_ms: float = 0):
    """Log how long the wrapped block took, even when it raises.

    Args:
        operation: Label used in the log line
        log_level: Loguru level name, case-insensitive
        threshold_ms: Stay silent for blocks faster than this

    Example:
        >>> with timer("Adding document 'report.pdf'"):
        ...     manager.add_document(text, "report.pdf")
    """
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        if elapsed_ms >= threshold_ms:
            logger.log(log_level.upper(), f"{operation} took {elapsed_ms:.2f}ms")
