"""Cron expression parser.

This module turns a crontab line (five time fields followed by a command)
into a fully expanded, immutable :class:`CronExpression`.

Design Principles:
    1. Immutable results: every field is a sorted tuple of distinct values
    2. One error type: callers only ever see CronParseError
    3. Pure: no I/O and no shared state, safe to call from any thread
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from cronparse.scheduling.fields import (
    FIELD_BOUNDS,
    CronFieldType,
    CronParseError,
    FieldParser,
)

logger = logging.getLogger(__name__)

# Number of leading time fields before the command.
TIME_FIELD_COUNT = 5


# =============================================================================
# Cron Expression
# =============================================================================


@dataclass(frozen=True)
class CronExpression:
    """Parsed cron expression with every field fully expanded.

    Example:
        >>> expr = CronExpression.parse("*/15 0 1,2,3,15 */2 1-5 /usr/bin/find")
        >>> expr.minutes
        (0, 15, 30, 45)
        >>> expr.command
        '/usr/bin/find'
    """

    minutes: tuple[int, ...]
    hours: tuple[int, ...]
    days_of_month: tuple[int, ...]
    months: tuple[int, ...]
    days_of_week: tuple[int, ...]
    command: str

    @classmethod
    def parse(cls, expression: str) -> "CronExpression":
        """Parse a cron expression.

        Args:
            expression: Five cron fields followed by a command.

        Returns:
            Parsed CronExpression.

        Raises:
            CronParseError: If expression is invalid.
        """
        return CronParser(expression).parse()

    def get_field(self, field_type: CronFieldType) -> tuple[int, ...]:
        """Get the expanded values of a time field by type."""
        return {
            CronFieldType.MINUTE: self.minutes,
            CronFieldType.HOUR: self.hours,
            CronFieldType.DAY_OF_MONTH: self.days_of_month,
            CronFieldType.MONTH: self.months,
            CronFieldType.DAY_OF_WEEK: self.days_of_week,
        }[field_type]

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary."""
        return {
            "minutes": list(self.minutes),
            "hours": list(self.hours),
            "days_of_month": list(self.days_of_month),
            "months": list(self.months),
            "days_of_week": list(self.days_of_week),
            "command": self.command,
        }

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize to a JSON document."""
        return json.dumps(self.to_dict(), indent=indent)


# =============================================================================
# Cron Parser
# =============================================================================


class CronParser:
    """Parser for a crontab line.

    Splits the line on whitespace, expands the five time fields and rejoins
    the remaining tokens into the command with single spaces.
    """

    def __init__(self, expression: Any) -> None:
        """Initialize parser with expression.

        Args:
            expression: Cron expression. Anything other than ``str`` is
                rejected when :meth:`parse` runs.
        """
        self._expression = expression

    def parse(self) -> CronExpression:
        """Parse the cron expression.

        Returns:
            Parsed CronExpression.

        Raises:
            CronParseError: If expression is invalid.
        """
        if not isinstance(self._expression, str):
            raise CronParseError("Cron expression must be a string")

        trimmed = self._expression.strip()
        if not trimmed:
            raise CronParseError("Cron expression cannot be empty")

        parts = trimmed.split()
        if len(parts) <= TIME_FIELD_COUNT:
            raise CronParseError(
                "Cron expression must have 5 time fields followed by a command"
            )

        time_fields = parts[:TIME_FIELD_COUNT]
        command = " ".join(parts[TIME_FIELD_COUNT:])

        try:
            minutes, hours, days_of_month, months, days_of_week = (
                self._parse_field(text, field_type)
                for text, field_type in zip(time_fields, CronFieldType)
            )
        except CronParseError:
            raise
        except Exception as e:
            raise CronParseError(f"Failed to parse cron expression: {e}") from e

        expression = CronExpression(
            minutes=tuple(minutes),
            hours=tuple(hours),
            days_of_month=tuple(days_of_month),
            months=tuple(months),
            days_of_week=self._normalize_weekdays(days_of_week),
            command=command,
        )
        logger.debug("Parsed cron expression %r -> %r", trimmed, expression)
        return expression

    def _parse_field(self, text: str, field_type: CronFieldType) -> list[int]:
        return FieldParser(FIELD_BOUNDS[field_type]).parse(text)

    @staticmethod
    def _normalize_weekdays(values: list[int]) -> tuple[int, ...]:
        """Fold the Sunday alias 7 onto 0."""
        return tuple(sorted({0 if day == 7 else day for day in values}))


# =============================================================================
# Public Functions
# =============================================================================


def parse_cron_expression(expression: str) -> CronExpression:
    """Parse a cron expression into its expanded fields.

    Args:
        expression: Five cron fields followed by a command, e.g.
            ``"*/15 0 1,2,3,15 */2 1-5 /usr/bin/find"``.

    Returns:
        Parsed CronExpression.

    Raises:
        CronParseError: If expression is invalid.
    """
    return CronParser(expression).parse()


def validate_expression(expression: str) -> list[str]:
    """Validate a cron expression.

    Args:
        expression: Cron expression to validate.

    Returns:
        List of validation errors (empty if valid).
    """
    errors = []

    try:
        parse_cron_expression(expression)
    except CronParseError as e:
        errors.append(str(e))

    return errors


def is_valid_expression(expression: str) -> bool:
    """Check if a cron expression is valid.

    Args:
        expression: Cron expression to check.

    Returns:
        True if valid.
    """
    try:
        parse_cron_expression(expression)
        return True
    except CronParseError:
        return False
