"""Tests for the cron field grammar.

Covers every field form, the ordering between overlapping alternatives,
list collapsing and rejection of malformed fields.
"""

import pytest

from cronparse import (
    ListField,
    ParseError,
    RangeField,
    SpecificField,
    Star,
    StepField,
    parse_field,
)
from cronparse.fields import cron_field, list_field, range_field, stepped
from cronparse.scanner import NoMatch, Scanner


# =============================================================================
# Simple Forms
# =============================================================================


class TestSimpleFields:
    """Tests for wildcard and single values."""

    def test_star(self):
        """Test parsing a wildcard."""
        assert parse_field("*") == Star()

    def test_specific(self):
        """Test parsing a single value."""
        assert parse_field("5") == SpecificField(5)

    def test_specific_multi_digit(self):
        """Test parsing a value with several digits."""
        assert parse_field("59") == SpecificField(59)

    def test_specific_leading_zero(self):
        """Test that leading zeros are accepted."""
        assert parse_field("07") == SpecificField(7)

    def test_single_value_is_not_wrapped_in_list(self):
        """Test that a one-item list collapses to the bare item."""
        field = parse_field("5")
        assert not isinstance(field, ListField)


# =============================================================================
# Ranges
# =============================================================================


class TestRangeFields:
    """Tests for range parsing."""

    @pytest.mark.parametrize("start,end", [(0, 0), (1, 5), (9, 17), (0, 59)])
    def test_valid_range(self, start, end):
        """Test that start <= end parses as a range."""
        assert parse_field(f"{start}-{end}") == RangeField(start, end)

    @pytest.mark.parametrize("start,end", [(9, 3), (1, 0), (59, 58)])
    def test_inverted_range_fails(self, start, end):
        """Test that start > end is rejected."""
        with pytest.raises(ParseError):
            parse_field(f"{start}-{end}")

    def test_inverted_range_reason_in_message(self):
        """Test that the error explains an inverted range."""
        with pytest.raises(ParseError) as exc:
            parse_field("9-3")
        assert "start of range must be less than or equal to end" in str(exc.value)
        assert exc.value.position == 3

    def test_inverted_range_is_grammar_failure(self):
        """Test that the range rule itself fails on an inverted range."""
        scanner = Scanner("9-3")
        with pytest.raises(NoMatch):
            range_field(scanner)

    def test_range_missing_end(self):
        """Test that a dangling range separator is rejected."""
        with pytest.raises(ParseError):
            parse_field("1-")


# =============================================================================
# Steps
# =============================================================================


class TestStepFields:
    """Tests for step parsing."""

    def test_star_step(self):
        """Test parsing */2."""
        assert parse_field("*/2") == StepField(Star(), 2)

    def test_range_step(self):
        """Test parsing 10-30/5."""
        assert parse_field("10-30/5") == StepField(RangeField(10, 30), 5)

    def test_specific_step(self):
        """Test parsing 5/10."""
        assert parse_field("5/10") == StepField(SpecificField(5), 10)

    def test_zero_step_fails(self):
        """Test that a step of 0 is rejected."""
        with pytest.raises(ParseError) as exc:
            parse_field("*/0")
        assert "step must be positive" in str(exc.value)

    def test_negative_step_fails(self):
        """Test that a negative step is rejected."""
        with pytest.raises(ParseError):
            parse_field("*/-5")

    def test_missing_step_fails(self):
        """Test that a step separator without a value is rejected."""
        with pytest.raises(ParseError):
            parse_field("*/")

    def test_nested_step_fails(self):
        """Test that steps do not stack."""
        with pytest.raises(ParseError):
            parse_field("*/2/3")

    def test_step_with_inverted_range_fails(self):
        """Test that a step cannot rescue an inverted range."""
        with pytest.raises(ParseError):
            parse_field("9-3/2")

    def test_failed_step_is_rewound(self):
        """Test that a failed step leaves the list rule a clean start."""
        scanner = Scanner("1,2")
        field = scanner.choice(stepped, list_field)
        assert field == ListField((SpecificField(1), SpecificField(2)))


# =============================================================================
# Lists
# =============================================================================


class TestListFields:
    """Tests for list parsing."""

    def test_simple_list(self):
        """Test parsing 1,2,3."""
        assert parse_field("1,2,3") == ListField(
            (SpecificField(1), SpecificField(2), SpecificField(3))
        )

    def test_mixed_list(self):
        """Test parsing a list of values and ranges."""
        assert parse_field("14,9-11,16-18") == ListField(
            (SpecificField(14), RangeField(9, 11), RangeField(16, 18))
        )

    def test_list_starting_with_range_fails(self):
        """Test that a leading range commits before the list is tried."""
        with pytest.raises(ParseError):
            parse_field("9-11,14,16-18")
        scanner = Scanner("9-11,14,16-18")
        assert cron_field(scanner) == RangeField(9, 11)
        assert scanner.remaining == ",14,16-18"

    def test_list_with_star(self):
        """Test that a wildcard can be a list item."""
        assert parse_field("1,*") == ListField((SpecificField(1), Star()))

    def test_list_with_specific_step(self):
        """Test that a stepped value can follow another list item."""
        assert parse_field("3,1/2") == ListField(
            (SpecificField(3), StepField(SpecificField(1), 2))
        )

    def test_list_rule_collapses_single_item(self):
        """Test that the list rule returns the bare item when alone."""
        scanner = Scanner("7")
        assert list_field(scanner) == SpecificField(7)

    def test_trailing_comma_left_unconsumed(self):
        """Test that a separator without a following item is not consumed."""
        scanner = Scanner("1,2,")
        field = cron_field(scanner)
        assert field == ListField((SpecificField(1), SpecificField(2)))
        assert scanner.remaining == ","

    def test_trailing_comma_fails_strict(self):
        """Test that parse_field rejects a trailing comma."""
        with pytest.raises(ParseError):
            parse_field("1,2,")

    def test_leading_comma_fails(self):
        """Test that a list cannot start with a separator."""
        with pytest.raises(ParseError):
            parse_field(",1")


# =============================================================================
# Rejections
# =============================================================================


class TestInvalidFields:
    """Tests for text that is not a field."""

    @pytest.mark.parametrize("text", ["", "a", "MON", "-1", "?", "L", " 1", "1 "])
    def test_rejected(self, text):
        """Test that non-field text is rejected."""
        with pytest.raises(ParseError):
            parse_field(text)

    def test_field_does_not_consume_separator(self):
        """Test that a field stops before a following space."""
        scanner = Scanner("*/5 1")
        assert cron_field(scanner) == StepField(Star(), 5)
        assert scanner.remaining == " 1"

    def test_overlong_integer_fails(self):
        """Test that an integer too long to convert is a parse error."""
        with pytest.raises(ParseError) as exc:
            parse_field("9" * 5000)
        assert "integer literal too long" in str(exc.value)

    def test_error_position(self):
        """Test that the error points at the offending character."""
        with pytest.raises(ParseError) as exc:
            parse_field("1,2x")
        assert exc.value.position == 3
        assert exc.value.expression == "1,2x"

    def test_rendering_reparses(self):
        """Test that str() of a parsed field parses back to the same value."""
        for text in ["*", "5", "1-5", "*/15", "1-30/5", "1,2,10-12", "3,1/2"]:
            field = parse_field(text)
            assert parse_field(str(field)) == field
