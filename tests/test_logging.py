"""Tests for logging setup."""

import io
import json
import logging

import pytest

from cronparse import parse_cron_expression
from cronparse.infrastructure.logging import (
    ROOT_LOGGER_NAME,
    ConsoleFormatter,
    JsonFormatter,
    LogConfig,
    LogLevel,
    configure_logging,
    get_logger,
    reset_logging,
)


@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()


def _record(message: str = "hello", **fields) -> logging.LogRecord:
    record = logging.LogRecord(
        name="cronparse.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=None,
    )
    if fields:
        record.fields = fields
    return record


# =============================================================================
# LogLevel Tests
# =============================================================================


class TestLogLevel:
    """Tests for level parsing."""

    @pytest.mark.parametrize(
        "text,level",
        [
            ("debug", LogLevel.DEBUG),
            ("INFO", LogLevel.INFO),
            ("warn", LogLevel.WARNING),
            ("Error", LogLevel.ERROR),
            ("fatal", LogLevel.CRITICAL),
            ("bogus", LogLevel.INFO),
        ],
    )
    def test_from_string(self, text, level):
        """Test names map to levels, unknown names fall back to INFO."""
        assert LogLevel.from_string(text) is level

    def test_matches_logging_module(self):
        """Test values line up with the logging module."""
        assert LogLevel.DEBUG == logging.DEBUG
        assert LogLevel.ERROR == logging.ERROR


# =============================================================================
# Formatter Tests
# =============================================================================


class TestFormatters:
    """Tests for console and JSON formatters."""

    def test_console(self):
        """Test console line layout."""
        line = ConsoleFormatter().format(_record("parsed", command="ls"))
        assert "INFO" in line
        assert "[cronparse.test]" in line
        assert line.endswith("parsed command=ls")

    def test_json(self):
        """Test JSON line content."""
        data = json.loads(JsonFormatter().format(_record("parsed", command="ls")))
        assert data["level"] == "INFO"
        assert data["logger"] == "cronparse.test"
        assert data["message"] == "parsed"
        assert data["command"] == "ls"
        assert "timestamp" in data

    def test_config_selects_formatter(self):
        """Test LogConfig picks the formatter by name."""
        assert isinstance(LogConfig(format="json").create_formatter(), JsonFormatter)
        assert isinstance(LogConfig().create_formatter(), ConsoleFormatter)


# =============================================================================
# Configuration Tests
# =============================================================================


class TestConfigureLogging:
    """Tests for configure_logging and get_logger."""

    def test_parser_debug_log(self):
        """Test the expression parser logs its result at debug level."""
        stream = io.StringIO()
        configure_logging(level="debug", format="json", stream=stream)

        parse_cron_expression("0 0 1 1 1 cmd")

        lines = [json.loads(line) for line in stream.getvalue().splitlines()]
        assert any(
            entry["logger"] == "cronparse.scheduling.cron" and "Parsed" in entry["message"]
            for entry in lines
        )

    def test_level_filters(self):
        """Test records below the level are dropped."""
        stream = io.StringIO()
        configure_logging(level="warning", stream=stream)

        get_logger("cronparse.test").info("quiet")
        get_logger("cronparse.test").warning("loud")

        output = stream.getvalue()
        assert "quiet" not in output
        assert "loud" in output

    def test_reconfigure_replaces_handler(self):
        """Test a second call does not duplicate output."""
        first = io.StringIO()
        second = io.StringIO()
        configure_logging(stream=first)
        configure_logging(stream=second)

        get_logger("cronparse.test").info("once")

        assert first.getvalue() == ""
        assert second.getvalue().count("once") == 1

    def test_get_logger_namespacing(self):
        """Test loggers are placed under the package namespace."""
        assert get_logger("cronparse.cli").name == "cronparse.cli"
        assert get_logger(ROOT_LOGGER_NAME).name == ROOT_LOGGER_NAME
        assert get_logger("tests").name == "cronparse.tests"
