"""Unit tests for the structured logger."""

import io
import json

import pytest

import druuid.internal.logging as log_module
from druuid.internal.logging import LogLevel, StructuredLogger, get_logger


@pytest.fixture
def stream():
    """In-memory stream for logger output."""
    return io.StringIO()


class TestStructuredLogger:
    """Tests for StructuredLogger output."""

    def test_writes_json_line(self, stream):
        """Records are single JSON lines with the standard keys."""
        StructuredLogger(LogLevel.INFO, stream=stream).info("hello", druuid=1)
        record = json.loads(stream.getvalue())
        assert record["level"] == "INFO"
        assert record["msg"] == "hello"
        assert record["druuid"] == 1
        assert record["timestamp"].endswith("Z")

    def test_filters_below_level(self, stream):
        """Records under the minimum level are dropped."""
        logger = StructuredLogger(LogLevel.WARN, stream=stream)
        logger.debug("quiet")
        logger.info("quiet")
        assert stream.getvalue() == ""

    def test_error_attached(self, stream):
        """Errors are rendered under err."""
        StructuredLogger(stream=stream).error("failed", error=ValueError("bad"))
        assert json.loads(stream.getvalue())["err"] == "bad"

    def test_unserializable_fields(self, stream):
        """Non-JSON values are stringified."""
        StructuredLogger(stream=stream).info("obj", value=object())
        assert "object" in json.loads(stream.getvalue())["value"]


class TestLogLevel:
    """Tests for level parsing."""

    @pytest.mark.parametrize("name,level", [
        ("debug", LogLevel.DEBUG),
        ("INFO", LogLevel.INFO),
        ("Warning", LogLevel.WARN),
        (" error ", LogLevel.ERROR),
    ])
    def test_parse(self, name, level):
        """Level names parse case-insensitively."""
        assert LogLevel.parse(name) is level


class TestGetLogger:
    """Tests for the process logger."""

    def test_singleton(self):
        """get_logger returns the same instance."""
        assert get_logger() is get_logger()

    def test_configure_replaces(self):
        """configure installs a new process logger."""
        original = log_module._logger
        try:
            logger = StructuredLogger.configure(LogLevel.ERROR)
            assert get_logger() is logger
            assert logger.level == LogLevel.ERROR
        finally:
            log_module._logger = original
