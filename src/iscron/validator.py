"""Per-field grammar and range validation.

A field is a comma-separated list of terms. Every term is checked on its
own: first its shape against a compiled grammar, then its numeric bounds,
range order and step ceiling against the field's :class:`FieldSpec`.

Term grammar::

    term   := "*" | "?" | alias ("-" alias)? | base ("-" num)? ("/" step)?
    base   := "*" | num
    num    := one or two ASCII digits
    step   := positive integer without a leading zero
    alias  := three letters from the field's alias table, any case
"""

from __future__ import annotations

import logging
import re

from iscron.fields import FieldSpec

logger = logging.getLogger(__name__)


_ALIAS_TERM = re.compile(r"([A-Z]{3})(?:-([A-Z]{3}))?")
_NUMERIC_TERM = re.compile(r"(\*|[0-9]{1,2})(?:-([0-9]{1,2}))?(?:/([1-9][0-9]*))?")

WILDCARD = "*"
QUESTION_MARK = "?"

# ECMAScript whitespace and line terminators. Unlike str.isspace(), the
# information separators \x1c-\x1f and NEL \x85 are excluded.
WHITESPACE = "\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
_SURROUNDING_WHITESPACE = re.compile(f"^[{WHITESPACE}]+|[{WHITESPACE}]+$")


def _strip(text: str) -> str:
    return _SURROUNDING_WHITESPACE.sub("", text)


def _reject(spec: FieldSpec, term: str, reason: str) -> bool:
    logger.debug("Rejected %s term %r: %s", spec.name, term, reason)
    return False


def validate_field(text: str, spec: FieldSpec, *, allow_alias: bool = True) -> bool:
    """Validate the text of a single cron field.

    Args:
        text: Field text, already separated from the rest of the expression.
        spec: Specification of the field at this position.
        allow_alias: Whether alias tokens from ``spec.aliases`` are accepted.

    Returns:
        True if every comma-separated term of the field is valid.
    """
    for segment in text.split(","):
        if not validate_term(_strip(segment), spec, allow_alias=allow_alias):
            return False
    return True


def validate_term(term: str, spec: FieldSpec, *, allow_alias: bool = True) -> bool:
    """Validate one comma-separated term of a field.

    Args:
        term: Trimmed term text.
        spec: Specification of the enclosing field.
        allow_alias: Whether alias tokens are accepted.

    Returns:
        True if the term is valid for the field.
    """
    if not term:
        return _reject(spec, term, "empty term")

    if term == QUESTION_MARK and spec.allow_question_mark:
        return True

    if allow_alias and spec.has_aliases:
        match = _ALIAS_TERM.fullmatch(term.upper())
        if match is not None:
            return _validate_alias_term(term, match, spec)

    match = _NUMERIC_TERM.fullmatch(term)
    if match is None:
        return _reject(spec, term, "malformed term")

    start, end, step = match.groups()

    start_value: int | None = None
    if start != WILDCARD:
        start_value = int(start)
        if not spec.contains(start_value):
            return _reject(spec, term, f"{start_value} out of range")

    if end is not None:
        end_value = int(end)
        if not spec.contains(end_value):
            return _reject(spec, term, f"{end_value} out of range")
        if start_value is not None and end_value < start_value:
            return _reject(spec, term, "range end before start")

    # Length is checked first: int() refuses very long digit strings.
    if step is not None and (len(step) > len(str(spec.max_value)) or int(step) > spec.max_value):
        return _reject(spec, term, f"step exceeds {spec.max_value}")

    return True


def _validate_alias_term(term: str, match: re.Match[str], spec: FieldSpec) -> bool:
    """Check that every alias in an ``ALIAS`` or ``ALIAS-ALIAS`` term resolves.

    Alias ranges are not order checked, so ``FRI-MON`` is accepted.
    """
    values: list[int] = []
    for token in match.groups():
        if token is None:
            continue
        value = spec.resolve_alias(token)
        if value is None:
            return _reject(spec, term, f"unknown alias {token}")
        values.append(value)

    logger.debug("Accepted %s term %r as %s", spec.name, term, "-".join(map(str, values)))
    return True
