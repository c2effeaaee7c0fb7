"""Tests for logging configuration."""

from __future__ import annotations

import json
import logging
from io import StringIO

import pytest
import structlog

from recency_cache.config import CacheSettings
from recency_cache.logging import configure_logging


@pytest.fixture
def root_stream():
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    root = logging.getLogger()
    previous = root.level
    root.addHandler(handler)
    yield stream
    root.removeHandler(handler)
    root.setLevel(previous)


class TestConfigureLogging:
    def test_json_output(self, root_stream: StringIO) -> None:
        configure_logging(CacheSettings(log_level="INFO", log_format="json"))
        structlog.get_logger("recency_cache.test").info("cache warmed", size=3)

        record = json.loads(root_stream.getvalue().strip().splitlines()[-1])
        assert record["event"] == "cache warmed"
        assert record["size"] == 3
        assert record["level"] == "info"
        assert record["logger"] == "recency_cache.test"
        assert "timestamp" in record

    def test_level_filtering(self, root_stream: StringIO) -> None:
        configure_logging(CacheSettings(log_level="WARNING"))
        structlog.get_logger("recency_cache.test").info("hidden")

        assert "hidden" not in root_stream.getvalue()
        assert logging.getLogger().level == logging.WARNING

    def test_console_format_from_env(
        self, root_stream: StringIO, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("RECENCY_CACHE_LOG_FORMAT", "console")
        monkeypatch.setenv("RECENCY_CACHE_LOG_LEVEL", "INFO")

        configure_logging()
        structlog.get_logger("recency_cache.test").info("cache warmed", size=3)

        line = root_stream.getvalue().strip().splitlines()[-1]
        with pytest.raises(json.JSONDecodeError):
            json.loads(line)
        assert "cache warmed" in line
        assert "size=3" in line
