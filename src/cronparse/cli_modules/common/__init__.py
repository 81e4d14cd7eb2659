"""Common CLI infrastructure.

This package provides shared components for CLI commands:
    - options: Reusable CLI options and arguments
    - output: Output formatting utilities
    - errors: CLI error handling
"""

from cronparse.cli_modules.common.output import (
    OutputFormatter,
    OutputLevel,
    ConsoleOutput,
    JsonOutput,
    get_formatter,
)
from cronparse.cli_modules.common.errors import (
    CLIError,
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ExpressionError,
    OutputError,
    handle_cli_error,
    error_boundary,
)

__all__ = [
    # Output
    "OutputFormatter",
    "OutputLevel",
    "ConsoleOutput",
    "JsonOutput",
    "get_formatter",
    # Errors
    "CLIError",
    "ConfigurationError",
    "ErrorCode",
    "ErrorContext",
    "ExpressionError",
    "OutputError",
    "handle_cli_error",
    "error_boundary",
]
