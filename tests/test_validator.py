"""Tests for per-field validation.

Covers term grammar, bounds, range order, steps, aliases and the
question mark for each field specification.
"""

import logging

import pytest

from iscron.fields import FIELD_SPECS, CronField
from iscron.validator import validate_field, validate_term

MINUTE = FIELD_SPECS[CronField.MINUTE]
HOUR = FIELD_SPECS[CronField.HOUR]
DAY_OF_MONTH = FIELD_SPECS[CronField.DAY_OF_MONTH]
MONTH = FIELD_SPECS[CronField.MONTH]
DAY_OF_WEEK = FIELD_SPECS[CronField.DAY_OF_WEEK]


# =============================================================================
# Bounds
# =============================================================================


class TestBounds:
    """Values at the bounds are accepted, values just outside are not."""

    @pytest.mark.parametrize("field", list(CronField))
    def test_min_and_max_accepted(self, field):
        spec = FIELD_SPECS[field]
        assert validate_field(str(spec.min_value), spec)
        assert validate_field(str(spec.max_value), spec)

    @pytest.mark.parametrize("field", list(CronField))
    def test_just_outside_rejected(self, field):
        spec = FIELD_SPECS[field]
        assert not validate_field(str(spec.max_value + 1), spec)
        if spec.min_value > 0:
            assert not validate_field(str(spec.min_value - 1), spec)

    def test_negative_rejected(self):
        assert not validate_field("-1", MINUTE)
        assert not validate_field("-1", HOUR)

    def test_day_of_month_zero_rejected(self):
        assert not validate_field("0", DAY_OF_MONTH)
        assert not validate_field("00", DAY_OF_MONTH)
        assert not validate_field("0-9", DAY_OF_MONTH)

    def test_three_digit_values_rejected(self):
        assert not validate_field("100", MINUTE)
        assert not validate_field("005", MINUTE)


# =============================================================================
# Grammar
# =============================================================================


class TestGrammar:
    """Tests for term shape."""

    @pytest.mark.parametrize(
        "text",
        ["*", "5", "05", "0-30", "*/5", "0/10", "0-30/5", "0,15,30,45", "1-10,*/2", "5-7,8-9,10-20"],
    )
    def test_valid_minute_terms(self, text):
        assert validate_field(text, MINUTE)

    @pytest.mark.parametrize(
        "text",
        [
            "",
            ",",
            ",1",
            "1,",
            "1,,2",
            "0.1",
            "1,1.5,2",
            "+1",
            "1-2-3",
            "1-*",
            "1-",
            "-",
            "1/2/3",
            "1/*",
            "1/",
            "20-30/",
            "*/",
            "*/-1",
            "*/1.5",
            "1*",
            "*1",
            "a",
            "#",
            "@",
            "?",
        ],
    )
    def test_malformed_minute_terms(self, text):
        assert not validate_field(text, MINUTE)

    def test_non_ascii_digits_rejected(self):
        assert not validate_field("\u0665", MINUTE)

    def test_terms_are_trimmed(self):
        assert validate_term("5", MINUTE)
        assert validate_field(" 5 , 10 ", MINUTE)

    def test_terms_trim_only_cron_whitespace(self):
        assert validate_field("\u00a05\ufeff", MINUTE)
        assert not validate_field("5\x1f", MINUTE)
        assert not validate_field("\x85*", MINUTE)

    def test_wildcard_range_end(self):
        assert validate_field("*-30", MINUTE)
        assert not validate_field("*-60", MINUTE)


# =============================================================================
# Ranges and Steps
# =============================================================================


class TestRanges:
    """Tests for range order."""

    @pytest.mark.parametrize(
        "text,spec",
        [
            ("30-15", MINUTE),
            ("20-11", HOUR),
            ("30-21", DAY_OF_MONTH),
            ("6-5", MONTH),
            ("4-3", DAY_OF_WEEK),
        ],
    )
    def test_inverted_range_rejected(self, text, spec):
        assert not validate_field(text, spec)

    def test_single_value_range(self):
        assert validate_field("5-5", MINUTE)

    def test_range_end_out_of_bounds(self):
        assert not validate_field("0-60", MINUTE)
        assert not validate_field("1-32", DAY_OF_MONTH)

    def test_day_of_week_ranges_up_to_seven(self):
        assert validate_field("0-7", DAY_OF_WEEK)
        assert validate_field("1-7", DAY_OF_WEEK)
        assert not validate_field("1-8", DAY_OF_WEEK)


class TestSteps:
    """Tests for step values."""

    @pytest.mark.parametrize("field", list(CronField))
    def test_zero_step_rejected(self, field):
        assert not validate_field("*/0", FIELD_SPECS[field])

    @pytest.mark.parametrize("field", list(CronField))
    def test_step_ceiling_is_field_max(self, field):
        spec = FIELD_SPECS[field]
        assert validate_field("*/1", spec)
        assert validate_field(f"*/{spec.max_value}", spec)
        assert not validate_field(f"*/{spec.max_value + 1}", spec)

    def test_step_after_range_and_value(self):
        assert validate_field("4-59/3", MINUTE)
        assert validate_field("1/7", DAY_OF_MONTH)
        assert validate_field("1-12/2", MONTH)

    def test_leading_zero_step_rejected(self):
        assert not validate_field("*/05", MINUTE)

    @pytest.mark.parametrize("field", list(CronField))
    def test_oversized_step_rejected(self, field):
        spec = FIELD_SPECS[field]
        assert not validate_field("*/1" + "0" * 5000, spec)
        assert not validate_field("1-2/9" + "9" * 4400, spec)

    def test_step_with_extra_digit_rejected(self):
        assert not validate_field("*/100", MINUTE)
        assert not validate_field("*/123", DAY_OF_WEEK)


# =============================================================================
# Aliases
# =============================================================================


class TestAliases:
    """Tests for month and day-of-week name aliases."""

    @pytest.mark.parametrize("token", ["JAN", "jan", "Jan", "DEC"])
    def test_month_alias(self, token):
        assert validate_field(token, MONTH)

    def test_alias_disabled(self):
        assert not validate_field("JAN", MONTH, allow_alias=False)
        assert not validate_field("MON-FRI", DAY_OF_WEEK, allow_alias=False)
        assert validate_field("1-5", DAY_OF_WEEK, allow_alias=False)

    def test_alias_ranges(self):
        assert validate_field("JAN-MAR", MONTH)
        assert validate_field("mon-fri", DAY_OF_WEEK)
        assert validate_field("SUN-SAT", DAY_OF_WEEK)

    def test_alias_range_is_not_order_checked(self):
        assert validate_field("FRI-MON", DAY_OF_WEEK)

    def test_alias_lists(self):
        assert validate_field("jan,JAN", MONTH)
        assert validate_field("MON,WED,FRI", DAY_OF_WEEK)
        assert validate_field("JAN,6,*/3", MONTH)

    @pytest.mark.parametrize(
        "text,spec",
        [
            ("XYZ", MONTH),
            ("MON", MONTH),
            ("JAN", DAY_OF_WEEK),
            ("JANUARY", MONTH),
            ("MONDAY", DAY_OF_WEEK),
            ("JAN-XYZ", MONTH),
            ("JAN-6", MONTH),
            ("JAN-MAR/2", MONTH),
            ("*/JAN", MONTH),
            ("*/SUN", DAY_OF_WEEK),
            ("mon-fri0345345", DAY_OF_WEEK),
        ],
    )
    def test_invalid_alias_terms(self, text, spec):
        assert not validate_field(text, spec)

    def test_fields_without_aliases_ignore_them(self):
        assert not validate_field("JAN", MINUTE)
        assert not validate_field("SUN", HOUR)


# =============================================================================
# Question Mark
# =============================================================================


class TestQuestionMark:
    """Tests for the ``?`` term."""

    def test_allowed_in_day_fields(self):
        assert validate_field("?", DAY_OF_MONTH)
        assert validate_field("?", DAY_OF_WEEK)

    @pytest.mark.parametrize("field", [CronField.SECOND, CronField.MINUTE, CronField.HOUR, CronField.MONTH])
    def test_rejected_elsewhere(self, field):
        assert not validate_field("?", FIELD_SPECS[field])

    def test_question_mark_is_a_whole_term(self):
        assert not validate_field("?/2", DAY_OF_MONTH)
        assert not validate_field("?-5", DAY_OF_WEEK)
        assert not validate_field("1?", DAY_OF_MONTH)


class TestLogging:
    """Rejections are logged at debug level."""

    def test_rejection_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="iscron.validator"):
            assert not validate_field("61", MINUTE)
        assert "minute" in caplog.text
        assert "out of range" in caplog.text

    def test_alias_values_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="iscron.validator"):
            assert validate_field("mon-fri", DAY_OF_WEEK)
            assert validate_field("Dec", MONTH)
        assert "as 1-5" in caplog.text
        assert "as 12" in caplog.text
