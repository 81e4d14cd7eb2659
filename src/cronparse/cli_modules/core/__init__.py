"""Core CLI commands for cronparse.

This package contains the CLI commands:
    - parse: Expand a cron expression into its field values
    - validate: Check cron expressions
"""

import typer

from cronparse.cli_modules.core.parse import parse_cmd
from cronparse.cli_modules.core.validate import validate_cmd


def register_commands(parent_app: typer.Typer) -> None:
    """Register core commands with the parent app.

    Args:
        parent_app: Parent Typer app to register commands to
    """
    parent_app.command(name="parse")(parse_cmd)
    parent_app.command(name="validate")(validate_cmd)


__all__ = [
    "register_commands",
    "parse_cmd",
    "validate_cmd",
]
