"""
Unit tests for logging configuration.
"""

from collections.abc import Iterator

import pytest
from loguru import logger

import fixeddec
from fixeddec.core.log_config import setup_logging


@pytest.fixture
def library_logging_disabled() -> Iterator[None]:
    """Restore the library's disabled logger state after each test."""
    yield
    logger.disable("fixeddec")


class TestLibraryLogging:
    """Tests for the library's logger state."""

    def test_should_be_silent_by_default(self, library_logging_disabled: None) -> None:
        """Test that library messages are disabled until opted in."""
        messages: list[str] = []
        sink_id = logger.add(messages.append, level="DEBUG", format="{message}")

        try:
            assert fixeddec.FixedDec["u32", 3].parse("1a") is None
        finally:
            logger.remove(sink_id)

        assert not any("rejected text" in message for message in messages)

    def test_should_emit_debug_messages_after_setup(self, library_logging_disabled: None) -> None:
        """Test that setup_logging enables library messages."""
        messages: list[str] = []
        stderr_sink = setup_logging(debug=True)
        sink_id = logger.add(messages.append, level="DEBUG", format="{message}")

        try:
            assert fixeddec.FixedDec["u32", 3].parse("1a") is None
        finally:
            logger.remove(sink_id)
            logger.remove(stderr_sink)

        assert any("rejected text" in message for message in messages)

    def test_should_return_sink_identifier(self, library_logging_disabled: None) -> None:
        """Test that the added sink can be removed."""
        sink_id = setup_logging()

        try:
            assert isinstance(sink_id, int)
        finally:
            logger.remove(sink_id)
