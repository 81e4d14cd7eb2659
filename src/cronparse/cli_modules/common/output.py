"""Output formatting utilities for CLI commands.

This module provides standardized output formatting for consistent
display across all CLI commands.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

import typer

from cronparse.cli_modules.common.errors import ConfigurationError


# =============================================================================
# Output Levels
# =============================================================================


class OutputLevel(Enum):
    """Output importance levels."""

    INFO = 1
    SUCCESS = 2
    ERROR = 3


# =============================================================================
# Color Theme
# =============================================================================


@dataclass(frozen=True)
class ColorTheme:
    """Color theme for terminal output."""

    success: str = "green"
    error: str = "red"
    key: str = "cyan"


DEFAULT_THEME = ColorTheme()


# =============================================================================
# Output Formatter Protocol
# =============================================================================


class OutputFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def format(self, data: Any) -> str:
        """Format data for output.

        Args:
            data: Data to format

        Returns:
            Formatted string
        """
        pass

    @abstractmethod
    def write(self, content: str, level: OutputLevel = OutputLevel.INFO) -> None:
        """Write content to output.

        Args:
            content: Content to write
            level: Output level
        """
        pass


# =============================================================================
# Console Output
# =============================================================================


class ConsoleOutput(OutputFormatter):
    """Console output formatter with color support."""

    def __init__(
        self,
        theme: ColorTheme = DEFAULT_THEME,
        no_color: bool = False,
    ) -> None:
        """Initialize console output.

        Args:
            theme: Color theme to use
            no_color: Disable colored output
        """
        self.theme = theme
        self.no_color = no_color

    def format(self, data: Any) -> str:
        """Format data for console display.

        Lists are rendered inline as comma separated values, which is how
        expanded cron fields read best.
        """
        if isinstance(data, dict):
            return self._format_dict(data)
        if isinstance(data, (list, tuple)):
            return ", ".join(str(item) for item in data)
        return str(data)

    def _format_dict(self, data: dict[str, Any]) -> str:
        lines = []
        for key, value in data.items():
            lines.append(f"{key}: {self.format(value)}")
        return "\n".join(lines)

    def write(self, content: str, level: OutputLevel = OutputLevel.INFO) -> None:
        """Write content to console.

        Args:
            content: Content to write
            level: Output level
        """
        color = self._get_color_for_level(level)
        err = level == OutputLevel.ERROR

        if self.no_color or color is None:
            typer.echo(content, err=err)
        else:
            typer.echo(typer.style(content, fg=color), err=err)

    def _get_color_for_level(self, level: OutputLevel) -> str | None:
        colors = {
            OutputLevel.INFO: None,
            OutputLevel.SUCCESS: self.theme.success,
            OutputLevel.ERROR: self.theme.error,
        }
        return colors.get(level)

    def info(self, message: str) -> None:
        self.write(message, OutputLevel.INFO)

    def success(self, message: str) -> None:
        self.write(message, OutputLevel.SUCCESS)

    def error(self, message: str) -> None:
        self.write(f"Error: {message}", OutputLevel.ERROR)

    def header(self, title: str) -> None:
        """Write a title underlined to its own width."""
        self.write(title)
        self.write("=" * len(title))

    def key_value(self, key: str, value: Any, prefix: str = "") -> None:
        """Write a key-value pair.

        Args:
            key: Key name
            value: Value, lists are joined with commas
            prefix: Text placed before the key
        """
        label = f"{prefix}{key}:"
        if not self.no_color:
            label = typer.style(label, fg=self.theme.key)
        self.write(f"{label} {self.format(value)}")


# =============================================================================
# JSON Output
# =============================================================================


class JsonOutput(OutputFormatter):
    """JSON output formatter.

    Formats data as JSON for machine consumption.
    """

    def __init__(
        self,
        pretty: bool = True,
        indent: int = 2,
    ) -> None:
        """Initialize JSON output.

        Args:
            pretty: Enable pretty printing
            indent: Indentation level for pretty printing
        """
        self.pretty = pretty
        self.indent = indent if pretty else None

    def format(self, data: Any) -> str:
        return json.dumps(data, indent=self.indent, default=str)

    def write(self, content: str, level: OutputLevel = OutputLevel.INFO) -> None:
        typer.echo(content)

    def write_data(self, data: Any) -> None:
        self.write(self.format(data))

    def write_to_file(self, data: Any, path: Path) -> None:
        """Write data to JSON file.

        Args:
            data: Data to write
            path: Output file path
        """
        path.write_text(self.format(data) + "\n", encoding="utf-8")


# =============================================================================
# Utility Functions
# =============================================================================


FORMATS = ("console", "json")


def get_formatter(format_type: str, no_color: bool = False) -> OutputFormatter:
    """Get an output formatter by type.

    Args:
        format_type: Format type (console, json)
        no_color: Disable colors for console

    Returns:
        OutputFormatter instance

    Raises:
        ConfigurationError: If the format is unknown. Values given on the
            command line are checked earlier, so this only triggers for
            configured ones.
    """
    formatters = {
        "console": lambda: ConsoleOutput(no_color=no_color),
        "json": lambda: JsonOutput(pretty=True),
    }

    factory = formatters.get(format_type.lower())
    if factory is None:
        raise ConfigurationError(
            f"Unknown output format {format_type!r}",
            hint=f"Set output.format to one of: {', '.join(FORMATS)}",
        )
    return factory()
