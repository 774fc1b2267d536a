"""Tests for logging configuration and context."""

import json
import logging

import pytest

from grocerylist.logging_config import (
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    configure_logging,
    get_logger,
    list_id_ctx,
    request_id_ctx,
    user_id_ctx,
)


def make_record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="grocerylist.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestLoggingContext:
    """Tests for context variable handling."""

    def test_context_manager_resets(self):
        """Test that values are restored on exit."""
        with LoggingContext(user_id="outer"):
            with LoggingContext(request_id="req-1", user_id="inner"):
                assert request_id_ctx.get() == "req-1"
                assert user_id_ctx.get() == "inner"

            assert request_id_ctx.get() is None
            assert user_id_ctx.get() == "outer"

        assert user_id_ctx.get() is None

    def test_none_values_leave_context_alone(self):
        with LoggingContext(list_id="list-1"):
            with LoggingContext(request_id="req-2"):
                assert list_id_ctx.get() == "list-1"


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter_includes_context(self):
        with LoggingContext(request_id="req-3", list_id="groceries"):
            output = json.loads(StructuredJsonFormatter().format(make_record()))

        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["request_id"] == "req-3"
        assert output["list_id"] == "groceries"
        assert "user_id" not in output
        assert output["timestamp"].endswith("Z")

    def test_contextual_formatter(self):
        with LoggingContext(request_id="0123456789abcdef", user_id="u1"):
            output = ContextualFormatter().format(make_record("combined"))

        assert "[req=01234567, user=u1]" in output
        assert output.endswith("| grocerylist.test [req=01234567, user=u1] | combined")


@pytest.fixture
def restore_root_logger():
    """Put back the root logger's handlers and level after reconfiguring it."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_json(self):
        configure_logging(log_level="DEBUG", json_format=True)

        root = logging.getLogger()
        assert root.level == logging.DEBUG
        assert isinstance(root.handlers[0].formatter, StructuredJsonFormatter)

    def test_configure_from_settings(self, monkeypatch):
        """Test that LOG_LEVEL and LOG_FORMAT are read from the environment."""
        monkeypatch.setenv("LOG_LEVEL", "warning")
        monkeypatch.setenv("LOG_FORMAT", "json")

        configure_logging()

        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert isinstance(root.handlers[0].formatter, StructuredJsonFormatter)

    def test_get_logger_adds_context(self):
        with LoggingContext(request_id="req-4"):
            _, kwargs = get_logger("grocerylist").process("msg", {})
        assert kwargs["extra"] == {"request_id": "req-4"}
