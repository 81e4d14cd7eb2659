"""Cron field parser.

Expands a single cron field (minute, hour, day of month, month or day of
week) into the explicit, ascending list of integers it selects.

Supported syntax inside one field:
    *           every value in the field bound
    N           a single value
    N-M         an inclusive range
    */S         every S-th value of the whole bound
    N/S         every S-th value from N to the bound maximum
    N-M/S       every S-th value from N to M
    A,B,...     any combination of the above, unioned
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto


# =============================================================================
# Exceptions
# =============================================================================


class CronParseError(ValueError):
    """Raised when a cron expression or one of its fields cannot be parsed."""


# =============================================================================
# Field Types
# =============================================================================


class CronFieldType(Enum):
    """The five time fields of a standard cron expression, in order."""

    MINUTE = auto()
    HOUR = auto()
    DAY_OF_MONTH = auto()
    MONTH = auto()
    DAY_OF_WEEK = auto()


@dataclass(frozen=True)
class FieldBound:
    """Inclusive bound for a cron field."""

    name: str
    min_value: int
    max_value: int

    def contains(self, value: int) -> bool:
        return self.min_value <= value <= self.max_value

    def __str__(self) -> str:
        return f"{self.min_value}-{self.max_value}"


# Day of week admits 7 as a legacy alias for Sunday; it is folded to 0 later.
FIELD_BOUNDS: dict[CronFieldType, FieldBound] = {
    CronFieldType.MINUTE: FieldBound("minute", 0, 59),
    CronFieldType.HOUR: FieldBound("hour", 0, 23),
    CronFieldType.DAY_OF_MONTH: FieldBound("day of month", 1, 31),
    CronFieldType.MONTH: FieldBound("month", 1, 12),
    CronFieldType.DAY_OF_WEEK: FieldBound("day of week", 0, 7),
}

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


# =============================================================================
# Field Parser
# =============================================================================


class FieldParser:
    """Parser for one cron field against a fixed bound.

    Example:
        >>> FieldParser(FIELD_BOUNDS[CronFieldType.MINUTE]).parse("*/15")
        [0, 15, 30, 45]
    """

    __slots__ = ("_bound",)

    def __init__(self, bound: FieldBound) -> None:
        """Initialize parser.

        Args:
            bound: Bound the parsed values must fall within.
        """
        self._bound = bound

    @property
    def bound(self) -> FieldBound:
        return self._bound

    def parse(self, field: str) -> list[int]:
        """Expand a field into its ascending list of values.

        Args:
            field: Raw field text, e.g. ``"1-5,10/15"``.

        Returns:
            Sorted list of distinct values.

        Raises:
            CronParseError: If any comma-separated part is malformed or
                out of bound.
        """
        values: set[int] = set()

        for part in field.split(","):
            segment = part.strip()

            if segment == "*":
                values.update(
                    range(self._bound.min_value, self._bound.max_value + 1)
                )
            elif "/" in segment:
                values.update(self._parse_step(segment))
            elif "-" in segment:
                values.update(self._parse_range(segment))
            else:
                values.add(self._parse_value(segment))

        return sorted(values)

    def _parse_step(self, segment: str) -> range:
        """Parse step expression (*/s, n/s or n-m/s)."""
        base, step_str = segment.split("/", 1)

        step = self._to_int(step_str)
        if step is None or step <= 0:
            raise CronParseError(
                f"Invalid step value {step_str!r} in {self._bound.name} field"
            )

        if base == "*":
            start = self._bound.min_value
            end = self._bound.max_value
        elif "-" in base:
            start, end = self._split_range(base)
        else:
            start = self._to_int(base)
            if start is None:
                raise CronParseError(
                    f"Invalid value {base!r} in {self._bound.name} field"
                )
            end = self._bound.max_value

        self._check_bounds(start, end)
        self._check_ascending(base, start, end)

        return range(start, end + 1, step)

    def _parse_range(self, segment: str) -> range:
        """Parse range expression (n-m)."""
        start, end = self._split_range(segment)

        self._check_bounds(start, end)
        self._check_ascending(segment, start, end)

        return range(start, end + 1)

    def _parse_value(self, segment: str) -> int:
        """Parse a single value (n)."""
        value = self._to_int(segment)
        if value is None:
            raise CronParseError(
                f"Invalid value {segment!r} in {self._bound.name} field"
            )

        if not self._bound.contains(value):
            raise CronParseError(
                f"Value {value} out of range in {self._bound.name} field "
                f"({self._bound})"
            )

        return value

    def _split_range(self, text: str) -> tuple[int, int]:
        start_str, end_str = text.split("-", 1)
        start = self._to_int(start_str)
        end = self._to_int(end_str)

        if start is None or end is None:
            raise CronParseError(
                f"Invalid range {text!r} in {self._bound.name} field"
            )

        return start, end

    def _check_bounds(self, start: int, end: int) -> None:
        if not (self._bound.contains(start) and self._bound.contains(end)):
            raise CronParseError(
                f"Value out of range in {self._bound.name} field ({self._bound})"
            )

    def _check_ascending(self, text: str, start: int, end: int) -> None:
        if start > end:
            raise CronParseError(
                f"Invalid range {text!r} in {self._bound.name} field: "
                f"start {start} is greater than end {end}"
            )

    @staticmethod
    def _to_int(text: str) -> int | None:
        """Convert a decimal token to int, or None if it is not one."""
        text = text.strip()
        if not _INTEGER_PATTERN.fullmatch(text):
            return None
        return int(text)

    def __repr__(self) -> str:
        return f"FieldParser({self._bound.name!r}, {self._bound})"


def parse_field(
    field: str,
    min_value: int,
    max_value: int,
    field_name: str,
) -> list[int]:
    """Expand one cron field into an ascending list of distinct values.

    Args:
        field: Raw field text.
        min_value: Smallest legal value (inclusive).
        max_value: Largest legal value (inclusive).
        field_name: Field name used in error messages.

    Returns:
        Sorted list of distinct values within ``[min_value, max_value]``.

    Raises:
        CronParseError: If the field is malformed or out of bound.
    """
    return FieldParser(FieldBound(field_name, min_value, max_value)).parse(field)
