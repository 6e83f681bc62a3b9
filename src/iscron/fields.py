"""Cron field definitions.

Each position of a cron expression is described by an immutable
:class:`FieldSpec`. The validator never branches on the field itself; all
field-specific behavior (bounds, alias table, ``?`` legality) is carried as
data in these records.

Field reference:
    Field         Values           Special
    ────────────────────────────────────────
    Second        0-59             * / , -
    Minute        0-59             * / , -
    Hour          0-23             * / , -
    Day of Month  1-31             * / , - ?
    Month         1-12 or JAN-DEC  * / , -
    Day of Week   0-7 or SUN-SAT   * / , - ?
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping


# =============================================================================
# Alias Tables
# =============================================================================


MONTH_ALIASES: tuple[str, ...] = (
    "JAN", "FEB", "MAR", "APR", "MAY", "JUN",
    "JUL", "AUG", "SEP", "OCT", "NOV", "DEC",
)

# SUN is 0; 7 has no alias of its own.
DAY_ALIASES: tuple[str, ...] = ("SUN", "MON", "TUE", "WED", "THU", "FRI", "SAT")


# =============================================================================
# Field Types
# =============================================================================


class CronField(str, Enum):
    """Positional fields of a cron expression."""

    SECOND = "second"
    MINUTE = "minute"
    HOUR = "hour"
    DAY_OF_MONTH = "day_of_month"
    MONTH = "month"
    DAY_OF_WEEK = "day_of_week"


@dataclass(frozen=True)
class FieldSpec:
    """Static description of one cron field.

    Attributes:
        name: Human readable field name.
        min_value: Smallest accepted numeric value.
        max_value: Largest accepted numeric value; also the step ceiling.
        allow_question_mark: Whether a bare ``?`` term is legal.
        aliases: Ordered 3-letter name tokens, or empty when the field has none.
        alias_offset: Numeric value of the first alias token.
    """

    name: str
    min_value: int
    max_value: int
    allow_question_mark: bool = False
    aliases: tuple[str, ...] = ()
    alias_offset: int = 0

    @property
    def has_aliases(self) -> bool:
        return bool(self.aliases)

    def resolve_alias(self, token: str) -> int | None:
        """Map an alias token to its numeric value.

        Args:
            token: Alias token, any case.

        Returns:
            The field value for the token, or None if the token is unknown.
        """
        upper = token.upper()
        if upper not in self.aliases:
            return None
        return self.aliases.index(upper) + self.alias_offset

    def contains(self, value: int) -> bool:
        """Check whether a numeric value lies within the field bounds."""
        return self.min_value <= value <= self.max_value


FIELD_SPECS: Mapping[CronField, FieldSpec] = MappingProxyType({
    CronField.SECOND: FieldSpec("second", 0, 59),
    CronField.MINUTE: FieldSpec("minute", 0, 59),
    CronField.HOUR: FieldSpec("hour", 0, 23),
    CronField.DAY_OF_MONTH: FieldSpec(
        "day of month", 1, 31,
        allow_question_mark=True,
    ),
    CronField.MONTH: FieldSpec(
        "month", 1, 12,
        aliases=MONTH_ALIASES,
        alias_offset=1,
    ),
    CronField.DAY_OF_WEEK: FieldSpec(
        "day of week", 0, 7,
        allow_question_mark=True,
        aliases=DAY_ALIASES,
        alias_offset=0,
    ),
})


STANDARD_FIELDS: tuple[CronField, ...] = (
    CronField.MINUTE,
    CronField.HOUR,
    CronField.DAY_OF_MONTH,
    CronField.MONTH,
    CronField.DAY_OF_WEEK,
)

EXTENDED_FIELDS: tuple[CronField, ...] = (CronField.SECOND,) + STANDARD_FIELDS


def field_order(seconds: bool = False) -> tuple[CronField, ...]:
    """Get the positional field layout for the standard or extended format."""
    return EXTENDED_FIELDS if seconds else STANDARD_FIELDS
