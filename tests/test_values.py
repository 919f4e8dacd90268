"""
Tests for the CSS value primitives.

Tests cover:
- Classification of raw input into LiteralValue / TokenRef / Calculation
- Argument splitting for nested calls
- Number formatting and unit extraction
"""

from decimal import Decimal

import pytest

from chuk_mcp_css.core import (
    Calculation,
    LiteralValue,
    TokenRef,
    format_number,
    parse_value,
    split_arguments,
    unit_symbol,
)
from chuk_mcp_css.errors import InvalidUnit, InvalidValue


class TestParseValue:
    """Tests for parse_value classification."""

    def test_int_is_literal(self):
        """Bare ints are unitless literals."""
        assert parse_value(24) == LiteralValue(24)

    def test_float_is_literal(self):
        """Bare floats are unitless literals."""
        assert parse_value(2.5) == LiteralValue(2.5)

    def test_string_with_unit(self):
        """Number-with-unit strings are literals; units are lowercased."""
        assert parse_value("24px") == LiteralValue(24, "px")
        assert parse_value("24PX") == LiteralValue(24, "px")
        assert parse_value(".5s") == LiteralValue(0.5, "s")
        assert parse_value("-12px") == LiteralValue(-12, "px")
        assert parse_value("50%") == LiteralValue(50, "%")

    def test_numeric_string_without_unit(self):
        """Numeric strings without a unit stay unitless."""
        assert parse_value("150") == LiteralValue(150)
        assert parse_value(" 150 ") == LiteralValue(150)

    def test_token(self):
        """Identifiers are tokens, case preserved."""
        assert parse_value("medium4") == TokenRef("medium4")
        assert parse_value("extra-long1") == TokenRef("extra-long1")
        assert parse_value("Ease-Out") == TokenRef("Ease-Out")

    def test_calculation(self):
        """Function calls keep their ordered raw arguments."""
        parsed = parse_value("clamp(16px, 24px, 32px)")
        assert parsed == Calculation("clamp", ("16px", "24px", "32px"))

    def test_nested_calculation(self):
        """Nested calls stay whole inside the outer argument list."""
        parsed = parse_value("max(12px, min(1rem, 24px), 40px)")
        assert isinstance(parsed, Calculation)
        assert parsed.name == "max"
        assert parsed.args == ("12px", "min(1rem, 24px)", "40px")

    def test_empty_call(self):
        """A call without arguments has an empty argument tuple."""
        assert parse_value("min()") == Calculation("min", ())

    @pytest.mark.parametrize(
        "raw",
        ["", "   ", "1 2", "min(a) max(b)", "clamp(1px, 2px", True, None, [1], float("nan")],
    )
    def test_invalid(self, raw):
        """Input fitting no variant raises InvalidValue."""
        with pytest.raises(InvalidValue):
            parse_value(raw)


class TestSplitArguments:
    """Tests for top-level argument splitting."""

    def test_simple(self):
        """Splits on commas and strips whitespace."""
        assert split_arguments("16px,24px , 32px") == ["16px", "24px", "32px"]

    def test_nested_commas(self):
        """Commas inside parentheses belong to the nested call."""
        assert split_arguments("16px, min(2vw, 24px), 32px") == [
            "16px",
            "min(2vw, 24px)",
            "32px",
        ]

    def test_blank(self):
        """Blank text has no arguments."""
        assert split_arguments("  ") == []

    def test_unbalanced(self):
        """Unbalanced parentheses raise InvalidValue."""
        with pytest.raises(InvalidValue):
            split_arguments("min(1px, 2px")
        with pytest.raises(InvalidValue):
            split_arguments("1px), (2px")


class TestCalculation:
    """Tests for the Calculation variant."""

    def test_to_css(self):
        """Serialises as name(a, b, c)."""
        calc = Calculation("clamp", ("16px", "24px", "32px"))
        assert calc.to_css() == "clamp(16px, 24px, 32px)"
        assert str(calc) == "clamp(16px, 24px, 32px)"

    def test_with_argument(self):
        """Replacing an argument returns a new call."""
        calc = Calculation("clamp", ("16px", "24px", "32px"))
        replaced = calc.with_argument(1, "3.1vw")
        assert replaced.to_css() == "clamp(16px, 3.1vw, 32px)"
        assert calc.args[1] == "24px"

    def test_with_argument_out_of_range(self):
        """Replacing a missing argument raises IndexError."""
        with pytest.raises(IndexError):
            Calculation("min", ("1px",)).with_argument(1, "2px")


class TestLiteralValue:
    """Tests for the LiteralValue variant."""

    def test_to_css(self):
        assert LiteralValue(360, "ms").to_css() == "360ms"
        assert LiteralValue(0.2, "s").to_css() == "0.2s"
        assert LiteralValue(5.0).to_css() == "5"

    def test_with_unit(self):
        assert LiteralValue(150).with_unit("ms") == LiteralValue(150, "ms")

    def test_is_zero(self):
        assert LiteralValue(0, "ms").is_zero
        assert not LiteralValue(1, "ms").is_zero


class TestFormatNumber:
    """Tests for format_number."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (360, "360"),
            (5.0, "5"),
            (3.125, "3.125"),
            (1e-7, "0.0000001"),
            (Decimal("3.10"), "3.1"),
            (Decimal("50.0"), "50"),
            (Decimal("-0.0"), "0"),
        ],
    )
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestUnitSymbol:
    """Tests for unit extraction."""

    def test_identifier(self):
        assert unit_symbol("vw") == "vw"
        assert unit_symbol("VMIN") == "vmin"
        assert unit_symbol("%") == "%"

    def test_zero_literal(self):
        """A zero-valued literal yields its unit."""
        assert unit_symbol("0vw") == "vw"
        assert unit_symbol("0%") == "%"

    @pytest.mark.parametrize("unit", ["", "5vw", "0", "v w", "px2", None, 3])
    def test_invalid(self, unit):
        with pytest.raises(InvalidUnit):
            unit_symbol(unit)
