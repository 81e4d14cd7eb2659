"""Reusable CLI options and arguments.

Standardized options using Typer's Annotated type pattern so every
command spells them the same way.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer

from cronparse.cli_modules.common.output import FORMATS


# =============================================================================
# Callback Functions
# =============================================================================


def format_callback(value: Optional[str]) -> Optional[str]:
    """Validate an output format name.

    Raises:
        typer.BadParameter: If the format is unknown
    """
    if value is None:
        return None
    if value.lower() not in FORMATS:
        raise typer.BadParameter(
            f"Unknown format {value!r}. Choose from: {', '.join(FORMATS)}"
        )
    return value.lower()


# =============================================================================
# Common Arguments
# =============================================================================


# Cron expression argument, optional so a configured default can be used
OptionalExpressionArg = Annotated[
    Optional[str],
    typer.Argument(
        help="Cron expression: five time fields followed by a command (quote it)",
    ),
]

# One or more cron expressions
ExpressionsArg = Annotated[
    list[str],
    typer.Argument(help="Cron expressions to validate (quote each one)"),
]


# =============================================================================
# Common Options
# =============================================================================


FormatOpt = Annotated[
    Optional[str],
    typer.Option(
        "--format",
        "-f",
        help="Output format (console, json)",
        callback=format_callback,
    ),
]

OutputOpt = Annotated[
    Optional[Path],
    typer.Option(
        "--output",
        "-o",
        help="Write the JSON result to this file",
        dir_okay=False,
    ),
]

NoColorOpt = Annotated[
    bool,
    typer.Option("--no-color", help="Disable colored output"),
]

VerboseOpt = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show error details"),
]

ConfigOpt = Annotated[
    Optional[Path],
    typer.Option(
        "--config",
        "-c",
        help="Configuration file (YAML or JSON)",
        dir_okay=False,
    ),
]

LogLevelOpt = Annotated[
    Optional[str],
    typer.Option("--log-level", help="Log level (debug, info, warning, error)"),
]

LogFormatOpt = Annotated[
    Optional[str],
    typer.Option("--log-format", help="Log format (console, json)"),
]
