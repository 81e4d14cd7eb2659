"""Structured logging setup for cronparse.

Library modules log through ``logging.getLogger(__name__)``; this module
only decides how those records are rendered when cronparse runs as a CLI.

Formats:
    console   2024-01-15 09:00:00 INFO     [cronparse.cli] message key=value
    json      {"timestamp": "...", "level": "INFO", "logger": "...", ...}

Usage:
    >>> from cronparse.infrastructure.logging import configure_logging, get_logger
    >>>
    >>> configure_logging(level="debug", format="json")
    >>> logger = get_logger(__name__)
    >>> logger.info("Parsed expression", extra={"fields": {"command": "ls"}})
"""

from __future__ import annotations

import json
import logging
import sys
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, TextIO

ROOT_LOGGER_NAME = "cronparse"


# =============================================================================
# Log Levels
# =============================================================================


class LogLevel(IntEnum):
    """Log severity levels (values match the logging module)."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Convert string to LogLevel."""
        mapping = {
            "debug": cls.DEBUG,
            "info": cls.INFO,
            "warning": cls.WARNING,
            "warn": cls.WARNING,
            "error": cls.ERROR,
            "critical": cls.CRITICAL,
            "fatal": cls.CRITICAL,
        }
        return mapping.get(level.lower(), cls.INFO)


# =============================================================================
# Formatters
# =============================================================================


def _record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Structured fields attached through ``extra={"fields": {...}}``."""
    fields = getattr(record, "fields", None)
    return dict(fields) if isinstance(fields, dict) else {}


class ConsoleFormatter(logging.Formatter):
    """Human-readable single line format."""

    def __init__(self, timestamp_format: str = "%Y-%m-%d %H:%M:%S") -> None:
        super().__init__()
        self._timestamp_format = timestamp_format

    def format(self, record: logging.LogRecord) -> str:
        ts = datetime.fromtimestamp(record.created).strftime(self._timestamp_format)
        parts = [ts, record.levelname.ljust(8), f"[{record.name}]", record.getMessage()]

        fields = _record_fields(record)
        if fields:
            parts.append(" ".join(f"{k}={v}" for k, v in fields.items()))

        result = " ".join(parts)

        if record.exc_info:
            result = f"{result}\n{self.formatException(record.exc_info)}"

        return result


class JsonFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(
                record.created, tz=timezone.utc
            ).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        data.update(_record_fields(record))

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        return json.dumps(data, default=str)


# =============================================================================
# Configuration
# =============================================================================


@dataclass
class LogConfig:
    """Logging configuration.

    Example:
        >>> config = LogConfig(level="debug", format="json")
    """

    level: str | LogLevel = LogLevel.INFO
    format: str = "console"  # console, json
    stream: TextIO | None = None

    @property
    def resolved_level(self) -> LogLevel:
        if isinstance(self.level, LogLevel):
            return self.level
        return LogLevel.from_string(str(self.level))

    def create_formatter(self) -> logging.Formatter:
        if self.format == "json":
            return JsonFormatter()
        return ConsoleFormatter()


_lock = threading.Lock()
_handler: logging.Handler | None = None


def configure_logging(
    *,
    level: str | LogLevel = LogLevel.INFO,
    format: str = "console",
    stream: TextIO | None = None,
) -> logging.Logger:
    """Configure the ``cronparse`` logger.

    Replaces any handler installed by a previous call.

    Args:
        level: Log level.
        format: Output format (console, json).
        stream: Output stream (defaults to stderr).

    Returns:
        The configured package logger.
    """
    global _handler

    config = LogConfig(level=level, format=format, stream=stream)
    root = logging.getLogger(ROOT_LOGGER_NAME)

    with _lock:
        if _handler is not None:
            root.removeHandler(_handler)

        handler = logging.StreamHandler(config.stream or sys.stderr)
        handler.setFormatter(config.create_formatter())
        root.addHandler(handler)
        root.setLevel(config.resolved_level)
        root.propagate = False
        _handler = handler

    return root


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the ``cronparse`` namespace.

    Args:
        name: Logger name (usually __name__).

    Returns:
        Logger instance.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(f"{ROOT_LOGGER_NAME}."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def reset_logging() -> None:
    """Remove the handler installed by configure_logging."""
    global _handler

    root = logging.getLogger(ROOT_LOGGER_NAME)

    with _lock:
        if _handler is not None:
            root.removeHandler(_handler)
            _handler.close()
            _handler = None
        root.setLevel(logging.NOTSET)
        root.propagate = True
