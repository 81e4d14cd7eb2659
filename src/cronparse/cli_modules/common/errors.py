"""CLI error handling utilities.

This module provides standardized error handling for CLI commands.
"""

from __future__ import annotations

import functools
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Callable, NoReturn, TypeVar

import typer

from cronparse.infrastructure.config import ConfigError
from cronparse.scheduling.fields import CronParseError

logger = logging.getLogger(__name__)


# =============================================================================
# Error Codes
# =============================================================================


class ErrorCode(Enum):
    """Standard CLI error codes."""

    # General errors (1-9)
    GENERAL_ERROR = 1

    # File errors (10-19)
    FILE_NOT_WRITABLE = 12

    # Parse errors (20-29)
    PARSE_ERROR = 20

    # Configuration errors (30-39)
    CONFIG_INVALID = 31


# =============================================================================
# Exception Classes
# =============================================================================


class CLIError(Exception):
    """Base exception for CLI errors.

    Attributes:
        message: Error message
        code: Error code
        details: Additional error details
        hint: Helpful hint for resolution
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.GENERAL_ERROR,
        details: dict[str, Any] | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.hint = hint

    def __str__(self) -> str:
        parts = [self.message]
        if self.hint:
            parts.append(f"Hint: {self.hint}")
        return "\n".join(parts)


class ExpressionError(CLIError):
    """Error when a cron expression cannot be parsed."""

    def __init__(
        self,
        error: CronParseError,
        expression: str | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize expression error.

        Args:
            error: The underlying parse error
            expression: Expression that failed to parse
            hint: Resolution hint
        """
        super().__init__(
            message=str(error),
            code=ErrorCode.PARSE_ERROR,
            details={"expression": expression},
            hint=hint
            or "Expected 'MIN HOUR DOM MON DOW COMMAND', e.g. '*/15 0 1,15 * 1-5 /bin/job'.",
        )
        self.error = error
        self.expression = expression


class ConfigurationError(CLIError):
    """Error with configuration."""

    def __init__(
        self,
        message: str,
        config_path: Path | str | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCode.CONFIG_INVALID,
            details={"config_path": str(config_path) if config_path else None},
            hint=hint or "Check the configuration file format and values.",
        )
        self.config_path = config_path


class OutputError(CLIError):
    """Error when output cannot be written."""

    def __init__(self, path: Path | str, reason: str) -> None:
        super().__init__(
            message=f"Cannot write output to {path}: {reason}",
            code=ErrorCode.FILE_NOT_WRITABLE,
            details={"path": str(path)},
        )
        self.path = path


# =============================================================================
# Error Handler
# =============================================================================


@dataclass
class ErrorContext:
    """Context for error handling.

    Attributes:
        verbose: Show verbose error output
    """

    verbose: bool = False


def to_cli_error(error: Exception) -> CLIError | None:
    """Translate a known library error into its CLI counterpart."""
    if isinstance(error, CLIError):
        return error
    if isinstance(error, CronParseError):
        return ExpressionError(error)
    if isinstance(error, ConfigError):
        return ConfigurationError(str(error))
    return None


def handle_cli_error(
    error: Exception,
    context: ErrorContext | None = None,
) -> NoReturn:
    """Report an error on stderr and exit with its code.

    Args:
        error: The exception to handle
        context: Error handling context

    Raises:
        typer.Exit: Always, carrying the error code
    """
    context = context or ErrorContext()

    if isinstance(error, typer.Exit):
        raise error

    cli_error = to_cli_error(error)

    if cli_error is not None:
        typer.echo(typer.style(f"Error: {cli_error.message}", fg="red"), err=True)

        if cli_error.hint:
            typer.echo(typer.style(f"Hint: {cli_error.hint}", fg="yellow"), err=True)

        if context.verbose and cli_error.details:
            typer.echo("\nDetails:", err=True)
            for key, value in cli_error.details.items():
                typer.echo(f"  {key}: {value}", err=True)

        exit_code = cli_error.code.value
        logger.debug(
            "%s (exit code %d): %s",
            type(cli_error).__name__,
            exit_code,
            cli_error.message,
        )

    else:
        logger.error("Unexpected error: %s", error, exc_info=error)
        typer.echo(typer.style(f"Error: {error}", fg="red"), err=True)
        exit_code = ErrorCode.GENERAL_ERROR.value

    raise typer.Exit(exit_code)


# =============================================================================
# Decorator
# =============================================================================


F = TypeVar("F", bound=Callable[..., Any])


def error_boundary(func: F) -> F:
    """Error boundary decorator for CLI commands.

    Known errors are reported through handle_cli_error; a ``verbose``
    keyword argument of the command turns on error details.

    Args:
        func: Function to wrap

    Returns:
        Wrapped function
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        context = ErrorContext(verbose=bool(kwargs.get("verbose")))
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except Exception as e:
            handle_cli_error(e, context)

    return wrapper  # type: ignore
