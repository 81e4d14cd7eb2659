"""Validate command - Check cron expressions without printing them.

This module implements the `cronparse validate` command.
"""

from __future__ import annotations

import logging

import typer

from cronparse.cli_modules.common.errors import ErrorCode, error_boundary
from cronparse.cli_modules.common.options import (
    ExpressionsArg,
    FormatOpt,
    NoColorOpt,
    VerboseOpt,
)
from cronparse.cli_modules.common.output import JsonOutput, get_formatter
from cronparse.infrastructure.config import get_config
from cronparse.scheduling.cron import validate_expression

logger = logging.getLogger(__name__)


@error_boundary
def validate_cmd(
    expressions: ExpressionsArg,
    format: FormatOpt = None,
    no_color: NoColorOpt = False,
    verbose: VerboseOpt = False,
) -> None:
    """Validate one or more cron expressions.

    Exits with a non-zero status if any expression is invalid.

    Examples:
        cronparse validate "0 9 * * 1-5 backup.sh"
        cronparse validate "0 9 * * 1-5 a" "61 * * * * b" --format json
    """
    config = get_config()
    format = (format or config.get_str("output.format", default="console")).lower()
    no_color = no_color or not config.get_bool("output.color", default=True)

    results = []
    for expression in expressions:
        errors = validate_expression(expression)
        results.append(
            {
                "expression": expression,
                "valid": not errors,
                "error": errors[0] if errors else None,
            }
        )

    invalid = [r for r in results if not r["valid"]]
    logger.debug("Validated %d expressions, %d invalid", len(results), len(invalid))

    formatter = get_formatter(format, no_color=no_color)
    if isinstance(formatter, JsonOutput):
        formatter.write_data(results)
    else:
        for r in results:
            if r["valid"]:
                formatter.success(f"{r['expression']}: valid")
            else:
                formatter.error(f"{r['expression']}: invalid: {r['error']}")

    if invalid:
        raise typer.Exit(ErrorCode.PARSE_ERROR.value)
