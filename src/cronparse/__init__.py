"""cronparse - Expand crontab lines into explicit schedule values."""

from cronparse.scheduling import (
    CronExpression,
    CronFieldType,
    CronParseError,
    CronParser,
    FieldBound,
    FIELD_BOUNDS,
    is_valid_expression,
    parse_cron_expression,
    parse_field,
    validate_expression,
)

__version__ = "0.1.0"

__all__ = [
    "CronExpression",
    "CronFieldType",
    "CronParseError",
    "CronParser",
    "FieldBound",
    "FIELD_BOUNDS",
    "is_valid_expression",
    "parse_cron_expression",
    "parse_field",
    "validate_expression",
    "__version__",
]
