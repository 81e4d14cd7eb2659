"""Parse command - Expand a cron expression into its field values.

This module implements the `cronparse parse` command.
"""

from __future__ import annotations

import logging

import typer

from cronparse.cli_modules.common.errors import OutputError, error_boundary
from cronparse.cli_modules.common.options import (
    FormatOpt,
    NoColorOpt,
    OptionalExpressionArg,
    OutputOpt,
    VerboseOpt,
)
from cronparse.cli_modules.common.output import ConsoleOutput, JsonOutput, get_formatter
from cronparse.infrastructure.config import DEFAULTS, get_config
from cronparse.scheduling.cron import CronExpression, parse_cron_expression

logger = logging.getLogger(__name__)

FIELD_LABELS = (
    ("Minutes", "minutes"),
    ("Hours", "hours"),
    ("Days of Month", "days_of_month"),
    ("Months", "months"),
    ("Days of Week", "days_of_week"),
    ("Command", "command"),
)


def render_console(
    expression: str,
    result: CronExpression,
    console: ConsoleOutput,
) -> None:
    """Print the field-by-field view followed by the JSON document."""
    console.header("Cron Parser")
    console.info(f'Input: "{expression}"')
    console.info("")
    console.info("Parsed Result:")
    for label, attr in FIELD_LABELS:
        console.key_value(label, getattr(result, attr), prefix="└─ ")
    console.info("")
    console.info("JSON Output:")
    console.info(result.to_json())


@error_boundary
def parse_cmd(
    expression: OptionalExpressionArg = None,
    format: FormatOpt = None,
    output: OutputOpt = None,
    no_color: NoColorOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """Parse a cron expression and show the expanded schedule.

    Without an expression, the configured demo expression is used.

    Examples:
        cronparse parse "*/15 0 1,2,3,15 */2 1-5 /usr/bin/find"
        cronparse parse "0 9 * * 1-5 backup.sh" --format json
        cronparse parse "0 0 1 * * report.py" -o schedule.json
    """
    config = get_config()
    if expression is None:
        expression = config.get_str(
            "demo.expression", default=DEFAULTS["demo"]["expression"]
        )
    format = (format or config.get_str("output.format", default="console")).lower()
    no_color = no_color or not config.get_bool("output.color", default=True)

    logger.debug("Parsing %r (format=%s)", expression, format)
    result = parse_cron_expression(expression)

    if output is not None:
        try:
            JsonOutput(pretty=True).write_to_file(result.to_dict(), output)
        except OSError as e:
            raise OutputError(output, e.strerror or str(e)) from e
        typer.echo(f"Output written to: {output}")
        return

    formatter = get_formatter(format, no_color=no_color)
    if isinstance(formatter, JsonOutput):
        formatter.write_data(result.to_dict())
    else:
        render_console(expression, result, formatter)
