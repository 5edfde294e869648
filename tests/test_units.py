"""Tests for unit classification, parsing and formatting.

Tests cover:
- is_number / is_px_number / is_deg_number / is_rad_number classification
- to_px formatting and pass-through
- to_number parse-or-default behavior and fraction rounding
"""

import math

import pytest

from rcu.core.units import (
    format_number,
    is_deg_number,
    is_number,
    is_px_number,
    is_rad_number,
    parse_float_prefix,
    to_number,
    to_px,
)


class TestIsNumber:
    """Plain numbers and numeric strings."""

    @pytest.mark.parametrize("value", [0, 5, 2.5, -3, "2", " 2.5 ", "007"])
    def test_numbers(self, value) -> None:
        assert is_number(value) is True

    @pytest.mark.parametrize("value", ["2px", "abc", "", "2.", ".5", "1.2.3", None, True, [1]])
    def test_not_numbers(self, value) -> None:
        assert is_number(value) is False

    @pytest.mark.parametrize("n", [0, 1, 12, 3.5])
    def test_unit_suffix_is_not_a_number(self, n) -> None:
        """A number is a number; the same number with px is not."""
        assert is_number(n)
        assert not is_number(f"{format_number(n)}px")


class TestUnitClassification:
    def test_px(self) -> None:
        assert is_px_number("2px")
        assert is_px_number(" 2.5 PX ")
        assert is_px_number("2 px")
        assert not is_px_number("2")
        assert not is_px_number("px")
        assert not is_px_number("2pxx")
        assert not is_px_number(2)

    def test_unicode_whitespace(self) -> None:
        assert is_px_number("\u00a02px")
        assert is_number("\u00a02\u00a0")
        assert to_number("\u00a02.5px") == 2.5
        assert not is_number("\u0662")  # ARABIC-INDIC DIGIT TWO

    def test_deg(self) -> None:
        assert is_deg_number("90deg")
        assert is_deg_number(" 45.5 DEG")
        assert not is_deg_number("90rad")
        assert not is_deg_number("90")

    def test_rad(self) -> None:
        assert is_rad_number("3.14rad")
        assert is_rad_number("1 Rad ")
        assert not is_rad_number("3.14deg")
        assert not is_rad_number(None)

    def test_categories_are_exclusive(self) -> None:
        for v in ("2", "2px", "2deg", "2rad"):
            hits = [f(v) for f in (is_number, is_px_number, is_deg_number, is_rad_number)]
            assert sum(hits) == 1, v


class TestToPx:
    def test_numbers_get_suffix(self) -> None:
        assert to_px(2) == "2px"
        assert to_px(2.5) == "2.5px"
        assert to_px(2.0) == "2px"
        assert to_px("3") == "3px"

    def test_pass_through(self) -> None:
        """Values with a unit, or unknown shapes, come back unchanged."""
        assert to_px("3px") == "3px"
        assert to_px("10deg") == "10deg"
        assert to_px("abc") == "abc"
        assert to_px(None) is None


class TestToNumber:
    def test_numeric_strings(self) -> None:
        assert to_number("2") == 2
        assert to_number(" 3.5 ") == 3.5
        assert to_number(7) == 7

    def test_unit_strings_use_leading_float(self) -> None:
        assert to_number("2px") == 2
        assert to_number("12.5rad") == 12.5
        assert to_number("-3e2abc") == -300

    def test_unparsable_is_zero(self) -> None:
        assert to_number("abc") == 0
        assert to_number("") == 0
        assert to_number(None) == 0
        assert to_number({"x": 1}) == 0

    def test_infinity(self) -> None:
        assert to_number("Infinity") == math.inf
        assert to_number("-Infinitypx") == -math.inf

    @pytest.mark.parametrize("n", [0, 1, 2.5, 100, 0.125])
    def test_recovers_number_from_px(self, n) -> None:
        """to_px yields a unit string; to_number gets n back via the parse fallback."""
        s = to_px(n)
        assert not is_number(s)
        assert to_number(s) == n

    def test_fraction_digits(self) -> None:
        assert to_number("3.14159", 2) == 3.14
        assert to_number("2.5px", 0) == 3.0
        # Exact binary value of 1.005 is just below 1.005.
        assert to_number(1.005, 2) == 1.0
        assert to_number("abc", 2) == 0

    def test_fraction_digits_out_of_range_is_clamped(self) -> None:
        assert to_number(2.7, -1) == 3.0

    def test_fraction_digits_wide_results(self) -> None:
        """Large values and many decimals still round instead of failing."""
        assert to_number(1e20, 10) == 1e20
        assert to_number(1.5, 100) == 1.5
        assert to_number(1.5, 500) == 1.5
        assert to_number("123456789012345678901234567890px", 2) == float("123456789012345678901234567890")


class TestHelpers:
    def test_format_number(self) -> None:
        assert format_number(2.0) == "2"
        assert format_number(0.1) == "0.1"
        assert format_number(7) == "7"
        assert format_number(float("nan")) == "NaN"
        assert format_number(float("-inf")) == "-Infinity"
        assert format_number(" 2 ") == " 2 "

    def test_parse_float_prefix(self) -> None:
        assert parse_float_prefix("  .5em") == 0.5
        assert parse_float_prefix("+4px") == 4.0
        assert parse_float_prefix("px4") is None
        assert parse_float_prefix(4) is None
