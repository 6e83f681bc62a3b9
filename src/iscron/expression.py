"""Whole-expression cron validation.

Usage:
    >>> from iscron import is_cron, is_extended_cron
    >>> is_cron("*/15 9-17 * * MON-FRI")
    True
    >>> is_cron("0 0 1 JAN *", alias=False)
    False
    >>> is_extended_cron("30 0 12 * * ?")
    True
"""

from __future__ import annotations

import logging
import re
from typing import NewType, TypeGuard

from iscron.fields import FIELD_SPECS, CronField, field_order
from iscron.options import CronOptions, OptionsInput, resolve_options
from iscron.validator import WHITESPACE, validate_field

logger = logging.getLogger(__name__)

CronExpression = NewType("CronExpression", str)
"""A string that passed :func:`is_cron` validation."""

_SEPARATOR = re.compile(f"[{WHITESPACE}]+")


def split_fields(value: object, *, seconds: bool = False) -> dict[CronField, str] | None:
    """Split an expression into its positional fields.

    Args:
        value: Candidate expression.
        seconds: Expect the 6-field format with a leading seconds field.

    Returns:
        Mapping of field to raw field text in positional order, or None if
        ``value`` is not a string or does not have exactly the expected
        number of whitespace-separated fields.
    """
    if not isinstance(value, str):
        return None

    tokens = [token for token in _SEPARATOR.split(value) if token]
    layout = field_order(seconds)
    if len(tokens) != len(layout):
        return None

    return dict(zip(layout, tokens))


def is_cron(
    value: object,
    options: OptionsInput = None,
    *,
    seconds: bool | None = None,
    alias: bool | None = None,
) -> TypeGuard[CronExpression]:
    """Check if a value is a valid cron expression.

    Args:
        value: The value to check. Anything other than ``str`` is invalid.
        options: CronOptions or a mapping with ``seconds``/``alias`` keys.
        seconds: Override ``options.seconds``. When True exactly six fields
            are required, otherwise exactly five.
        alias: Override ``options.alias``. Enables JAN-DEC and SUN-SAT.

    Returns:
        True if ``value`` is a valid expression for the chosen format.

    Raises:
        CronOptionsError: If the options themselves are malformed.
    """
    resolved = resolve_options(options, seconds=seconds, alias=alias)

    parts = split_fields(value, seconds=resolved.seconds)
    if parts is None:
        logger.debug("Rejected %r: not a %d-field string", value, resolved.field_count)
        return False

    for field, text in parts.items():
        if not validate_field(text, FIELD_SPECS[field], allow_alias=resolved.alias):
            return False

    return True


def is_standard_cron(value: object) -> TypeGuard[CronExpression]:
    """Check if a value is a valid 5-field cron expression.

    Equivalent to ``is_cron(value, seconds=False)``.
    """
    return is_cron(value, CronOptions(seconds=False))


def is_extended_cron(value: object) -> TypeGuard[CronExpression]:
    """Check if a value is a valid 6-field cron expression with seconds.

    Equivalent to ``is_cron(value, seconds=True)``.
    """
    return is_cron(value, CronOptions(seconds=True))
