"""Tests for logging configuration and helpers."""

import logging

import pytest

from envtags.core.tag_set import TagSet
from envtags.observability.log_utils import log_with_context, safe_log_value
from envtags.observability.logger import configure_logging, get_logger


class TestSafeLogValue:
    """Tests for safe_log_value."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "None"),
            ("text", "text"),
            (["a", "b"], "list(2 items)"),
            (frozenset({"a"}), "frozenset(1 items)"),
            ({"a": 1}, "dict(1 keys)"),
            (12, "12"),
            (TagSet({"service": "orders", "host": "h1"}), "TagSet(2 keys)"),
            (("region", "zone"), "tuple(2 items)"),
        ],
    )
    def test_converts_values(self, value, expected: str) -> None:
        """Values are summarized as strings."""
        assert safe_log_value(value) == expected

    def test_truncates_long_values(self) -> None:
        """Long strings are truncated with the total length."""
        result = safe_log_value("x" * 20, max_length=5)

        assert result == "xxxxx... (truncated, 20 total)"

    def test_unprintable_value(self) -> None:
        """Objects whose __str__ fails are reported by type."""

        class Broken:
            def __str__(self) -> str:
                raise RuntimeError("boom")

        assert safe_log_value(Broken()) == "<unable to log: RuntimeError>"


class TestLogWithContext:
    """Tests for log_with_context."""

    def test_context_attached_to_record(self, caplog: pytest.LogCaptureFixture) -> None:
        """Context values are stringified onto the log record."""
        logger = get_logger("envtags.test")

        with caplog.at_level(logging.INFO, logger="envtags.test"):
            log_with_context(logger, logging.INFO, "Built tags", tag_count=3, keys=["a"])

        record = caplog.records[0]
        assert record.getMessage() == "Built tags"
        assert record.tag_count == "3"
        assert record.keys == "list(1 items)"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_sets_level_and_single_handler(self) -> None:
        """Root logger gets the requested level and exactly one handler."""
        root = logging.getLogger()
        saved_handlers, saved_level = root.handlers[:], root.level
        try:
            configure_logging("debug")
            configure_logging("warning")

            assert root.level == logging.WARNING
            assert len(root.handlers) == 1
        finally:
            for handler in root.handlers[:]:
                root.removeHandler(handler)
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)
