"""Scheduling module for cronparse.

This module expands standard 5-field crontab lines into explicit value sets.

Syntax Reference:
    Field         Values          Special Characters
    ─────────────────────────────────────────────────
    Minute        0-59            * / , -
    Hour          0-23            * / , -
    Day of Month  1-31            * / , -
    Month         1-12            * / , -
    Day of Week   0-7 (7 = Sun)   * / , -

Special Characters:
    *   Any value
    ,   List separator (1,3,5)
    -   Range (1-5)
    /   Step (*/15 = every 15)

Usage:
    >>> from cronparse.scheduling import parse_cron_expression
    >>>
    >>> expr = parse_cron_expression("0 9 * * 1-5 /opt/backup.sh")
    >>> expr.hours
    (9,)
    >>> expr.days_of_week
    (1, 2, 3, 4, 5)
"""

from cronparse.scheduling.fields import (
    # Field parsing
    CronFieldType,
    CronParseError,
    FieldBound,
    FieldParser,
    FIELD_BOUNDS,
    parse_field,
)

from cronparse.scheduling.cron import (
    # Expression parsing
    CronExpression,
    CronParser,
    parse_cron_expression,
    # Validation
    validate_expression,
    is_valid_expression,
)

__all__ = [
    # Field parsing
    "CronFieldType",
    "CronParseError",
    "FieldBound",
    "FieldParser",
    "FIELD_BOUNDS",
    "parse_field",
    # Expression parsing
    "CronExpression",
    "CronParser",
    "parse_cron_expression",
    # Validation
    "validate_expression",
    "is_valid_expression",
]
