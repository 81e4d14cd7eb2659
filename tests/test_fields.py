"""Tests for the cron field parser.

Covers wildcard, single value, range and step syntax, comma lists,
bound checking and the integer token rules.
"""

import pytest

from cronparse.scheduling import (
    CronFieldType,
    CronParseError,
    FieldBound,
    FieldParser,
    FIELD_BOUNDS,
    parse_field,
)


# =============================================================================
# FieldBound Tests
# =============================================================================


class TestFieldBounds:
    """Tests for the fixed field bounds."""

    @pytest.mark.parametrize(
        "field_type,name,min_value,max_value",
        [
            (CronFieldType.MINUTE, "minute", 0, 59),
            (CronFieldType.HOUR, "hour", 0, 23),
            (CronFieldType.DAY_OF_MONTH, "day of month", 1, 31),
            (CronFieldType.MONTH, "month", 1, 12),
            (CronFieldType.DAY_OF_WEEK, "day of week", 0, 7),
        ],
    )
    def test_bounds(self, field_type, name, min_value, max_value):
        """Test each field has the expected inclusive bound."""
        bound = FIELD_BOUNDS[field_type]
        assert bound.name == name
        assert bound.min_value == min_value
        assert bound.max_value == max_value

    def test_field_order(self):
        """Test field types are declared in crontab order."""
        assert [t.name for t in CronFieldType] == [
            "MINUTE", "HOUR", "DAY_OF_MONTH", "MONTH", "DAY_OF_WEEK",
        ]

    def test_contains(self):
        """Test inclusive containment."""
        bound = FieldBound("hour", 0, 23)
        assert bound.contains(0)
        assert bound.contains(23)
        assert not bound.contains(24)
        assert not bound.contains(-1)

    def test_str(self):
        """Test bound renders as min-max."""
        assert str(FieldBound("month", 1, 12)) == "1-12"

    def test_frozen(self):
        """Test bounds cannot be modified."""
        with pytest.raises(AttributeError):
            FIELD_BOUNDS[CronFieldType.MINUTE].max_value = 60


# =============================================================================
# Wildcard Tests
# =============================================================================


class TestWildcard:
    """Tests for the * wildcard."""

    @pytest.mark.parametrize("field_type", list(CronFieldType))
    def test_wildcard_covers_bound(self, field_type):
        """Test * expands to the whole closed interval."""
        bound = FIELD_BOUNDS[field_type]
        values = FieldParser(bound).parse("*")
        assert values == list(range(bound.min_value, bound.max_value + 1))

    def test_wildcard_with_surrounding_whitespace(self):
        """Test parts are trimmed before classification."""
        assert parse_field(" * ", 1, 12, "month") == list(range(1, 13))


# =============================================================================
# Single Value Tests
# =============================================================================


class TestSingleValue:
    """Tests for single values."""

    def test_single_value(self):
        """Test a lone integer."""
        assert parse_field("30", 0, 59, "minute") == [30]

    def test_bound_edges(self):
        """Test both bound edges are accepted."""
        assert parse_field("0", 0, 59, "minute") == [0]
        assert parse_field("59", 0, 59, "minute") == [59]

    def test_leading_zero(self):
        """Test leading zeros are decimal."""
        assert parse_field("05", 0, 59, "minute") == [5]

    def test_value_above_bound(self):
        """Test value above max is rejected."""
        with pytest.raises(CronParseError) as exc:
            parse_field("60", 0, 59, "minute")
        assert "out of range" in str(exc.value)
        assert "minute" in str(exc.value)
        assert "0-59" in str(exc.value)

    def test_value_below_bound(self):
        """Test value below min is rejected."""
        with pytest.raises(CronParseError):
            parse_field("0", 1, 31, "day of month")

    @pytest.mark.parametrize("token", ["abc", "", "1.5", "1_0", "5x", "x5", "+"])
    def test_not_an_integer(self, token):
        """Test non-decimal tokens are rejected."""
        with pytest.raises(CronParseError) as exc:
            parse_field(token, 0, 59, "minute")
        assert "Invalid value" in str(exc.value)


# =============================================================================
# Range Tests
# =============================================================================


class TestRange:
    """Tests for n-m ranges."""

    def test_simple_range(self):
        """Test inclusive range."""
        assert parse_field("9-17", 0, 23, "hour") == list(range(9, 18))

    def test_full_range(self):
        """Test a range over the whole bound equals the wildcard."""
        assert parse_field("0-59", 0, 59, "minute") == parse_field("*", 0, 59, "minute")

    def test_single_value_range(self):
        """Test start == end gives one value."""
        assert parse_field("5-5", 0, 59, "minute") == [5]

    def test_descending_range_rejected(self):
        """Test start > end is an error rather than an empty expansion."""
        with pytest.raises(CronParseError) as exc:
            parse_field("10-5", 0, 59, "minute")
        assert "greater than end" in str(exc.value)

    @pytest.mark.parametrize("token", ["1-abc", "abc-5", "1-", "-5", "1-2-3"])
    def test_invalid_range(self, token):
        """Test malformed range endpoints."""
        with pytest.raises(CronParseError) as exc:
            parse_field(token, 0, 59, "minute")
        assert "Invalid range" in str(exc.value)

    def test_range_out_of_bound(self):
        """Test range endpoint outside the bound."""
        with pytest.raises(CronParseError) as exc:
            parse_field("20-25", 0, 23, "hour")
        assert "out of range" in str(exc.value)
        assert "0-23" in str(exc.value)


# =============================================================================
# Step Tests
# =============================================================================


class TestStep:
    """Tests for step syntax."""

    def test_wildcard_step(self):
        """Test */n over the whole bound."""
        assert parse_field("*/15", 0, 59, "minute") == [0, 15, 30, 45]

    def test_wildcard_step_from_one(self):
        """Test */n starts at the bound minimum."""
        assert parse_field("*/2", 1, 12, "month") == [1, 3, 5, 7, 9, 11]
        assert parse_field("*/5", 1, 31, "day of month") == [1, 6, 11, 16, 21, 26, 31]

    def test_step_of_one_equals_wildcard(self):
        """Test */1 expands like *."""
        assert parse_field("*/1", 0, 59, "minute") == list(range(60))

    def test_range_step(self):
        """Test n-m/s."""
        assert parse_field("1-10/3", 0, 59, "minute") == [1, 4, 7, 10]
        assert parse_field("10-50/20", 0, 59, "minute") == [10, 30, 50]

    def test_range_step_end_not_on_step(self):
        """Test the last value does not exceed the range end."""
        assert parse_field("2-8/3", 1, 12, "month") == [2, 5, 8]
        assert parse_field("0-10/4", 0, 59, "minute") == [0, 4, 8]

    def test_start_step(self):
        """Test n/s runs to the bound maximum."""
        assert parse_field("5/20", 0, 59, "minute") == [5, 25, 45]

    def test_step_larger_than_range(self):
        """Test a step larger than the range keeps only the start."""
        assert parse_field("*/100", 0, 59, "minute") == [0]

    @pytest.mark.parametrize("token", ["*/0", "*/-1", "*/abc", "*/", "1-5/x", "*/2/3"])
    def test_invalid_step(self, token):
        """Test zero, negative and non-integer steps."""
        with pytest.raises(CronParseError) as exc:
            parse_field(token, 0, 59, "minute")
        assert "Invalid step value" in str(exc.value)

    def test_invalid_step_start(self):
        """Test non-integer start before the step."""
        with pytest.raises(CronParseError) as exc:
            parse_field("x/5", 0, 59, "minute")
        assert "Invalid value" in str(exc.value)

    def test_invalid_step_range(self):
        """Test malformed range before the step."""
        with pytest.raises(CronParseError) as exc:
            parse_field("1-x/5", 0, 59, "minute")
        assert "Invalid range" in str(exc.value)

    def test_step_range_out_of_bound(self):
        """Test range endpoint outside the bound."""
        with pytest.raises(CronParseError) as exc:
            parse_field("0-24/2", 0, 23, "hour")
        assert "out of range" in str(exc.value)

    def test_step_start_out_of_bound(self):
        """Test start outside the bound."""
        with pytest.raises(CronParseError):
            parse_field("0/5", 1, 12, "month")

    def test_descending_step_range_rejected(self):
        """Test start > end in a stepped range."""
        with pytest.raises(CronParseError) as exc:
            parse_field("50-10/5", 0, 59, "minute")
        assert "greater than end" in str(exc.value)


# =============================================================================
# List Tests
# =============================================================================


class TestList:
    """Tests for comma-separated lists."""

    def test_values(self):
        """Test a list of single values."""
        assert parse_field("1,2,3,15", 1, 31, "day of month") == [1, 2, 3, 15]

    def test_unsorted_input_is_sorted(self):
        """Test output is ascending regardless of input order."""
        assert parse_field("45,0,30,15", 0, 59, "minute") == [0, 15, 30, 45]

    def test_duplicates_collapse(self):
        """Test repeated values appear once."""
        assert parse_field("0,0,0", 0, 59, "minute") == [0]

    def test_overlapping_ranges_collapse(self):
        """Test overlapping ranges appear once."""
        assert parse_field("1-3,2-4", 0, 59, "minute") == [1, 2, 3, 4]

    def test_mixed_forms(self):
        """Test values, ranges and steps together."""
        assert parse_field("0,10-12,*/20", 0, 59, "minute") == [0, 10, 11, 12, 20, 40]

    def test_whitespace_around_parts(self):
        """Test each part is trimmed."""
        assert parse_field("1, 2 ,3", 0, 59, "minute") == [1, 2, 3]

    def test_empty_part_rejected(self):
        """Test an empty list element is an invalid value."""
        with pytest.raises(CronParseError):
            parse_field("1,,2", 0, 59, "minute")

    def test_one_bad_part_fails_whole_field(self):
        """Test no partial result on error."""
        with pytest.raises(CronParseError):
            parse_field("1,2,99", 0, 59, "minute")


# =============================================================================
# Parser Object Tests
# =============================================================================


class TestFieldParser:
    """Tests for the FieldParser class."""

    def test_bound_property(self):
        """Test parser exposes its bound."""
        bound = FIELD_BOUNDS[CronFieldType.HOUR]
        assert FieldParser(bound).bound is bound

    def test_repr(self):
        """Test repr shows name and bound."""
        parser = FieldParser(FIELD_BOUNDS[CronFieldType.MONTH])
        assert repr(parser) == "FieldParser('month', 1-12)"

    def test_deterministic(self):
        """Test parsing the same field twice gives equal results."""
        parser = FieldParser(FIELD_BOUNDS[CronFieldType.MINUTE])
        assert parser.parse("*/7,3-9") == parser.parse("*/7,3-9")

    def test_error_is_value_error(self):
        """Test CronParseError can be caught as ValueError."""
        with pytest.raises(ValueError):
            parse_field("x", 0, 59, "minute")
