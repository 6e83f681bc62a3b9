"""iscron - check whether a string is a valid cron expression.

Supports standard 5-field expressions::

    minute hour day-of-month month day-of-week

and extended 6-field expressions with a leading seconds field::

    second minute hour day-of-month month day-of-week

Usage:
    >>> from iscron import is_cron, is_standard_cron, is_extended_cron
    >>>
    >>> is_cron("0 9 * * MON-FRI")
    True
    >>> is_cron("*/10 * * * * *", seconds=True)
    True
    >>> is_standard_cron("60 * * * *")
    False
"""

from iscron.errors import CronOptionsError, IsCronError
from iscron.expression import (
    CronExpression,
    is_cron,
    is_extended_cron,
    is_standard_cron,
    split_fields,
)
from iscron.fields import (
    DAY_ALIASES,
    EXTENDED_FIELDS,
    FIELD_SPECS,
    MONTH_ALIASES,
    STANDARD_FIELDS,
    CronField,
    FieldSpec,
)
from iscron.options import CronOptions
from iscron.validator import validate_field

__version__ = "1.0.0"

__all__ = [
    # Predicates
    "is_cron",
    "is_standard_cron",
    "is_extended_cron",
    "validate_field",
    "split_fields",
    # Types
    "CronExpression",
    "CronOptions",
    "CronField",
    "FieldSpec",
    # Field tables
    "FIELD_SPECS",
    "STANDARD_FIELDS",
    "EXTENDED_FIELDS",
    "MONTH_ALIASES",
    "DAY_ALIASES",
    # Errors
    "IsCronError",
    "CronOptionsError",
]
