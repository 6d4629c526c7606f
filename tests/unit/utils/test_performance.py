"""Tests for the timer context manager."""

import pytest
from loguru import logger

from lumos.utils.performance import timer


@pytest.fixture
def log_messages():
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record), level="DEBUG")
    yield messages
    logger.remove(handler_id)


class TestTimer:

    def test_logs_elapsed_time(self, log_messages):
        with timer("Indexing report.pdf"):
            pass

        record = log_messages[-1]
        assert record["level"].name == "INFO"
        assert record["message"].startswith("Indexing report.pdf took ")
        assert record["message"].endswith("ms")

    def test_custom_level(self, log_messages):
        with timer("Chunking", log_level="debug"):
            pass

        assert log_messages[-1]["level"].name == "DEBUG"

    def test_threshold_suppresses_fast_operations(self, log_messages):
        with timer("Fast", threshold_ms=60_000):
            pass

        assert not any(r["message"].startswith("Fast took") for r in log_messages)

    def test_logs_when_body_raises(self, log_messages):
        with pytest.raises(ValueError):
            with timer("Failing"):
                raise ValueError("boom")

        assert log_messages[-1]["message"].startswith("Failing took")
