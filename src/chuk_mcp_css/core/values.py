"""
CSS value primitives - LiteralValue, TokenRef, Calculation.

Every input the helpers accept is classified into exactly one of these
variants before it is resolved, so resolution code dispatches on the
variant instead of sniffing raw strings.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from decimal import Decimal

from chuk_mcp_css.errors import InvalidUnit, InvalidValue

NUMBER_PATTERN = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+))([a-zA-Z]+|%)?$")
IDENT_PATTERN = re.compile(r"^-?[a-zA-Z_][a-zA-Z0-9_-]*$")
CALL_PATTERN = re.compile(r"^(-?[a-zA-Z_][a-zA-Z0-9_-]*)\((.*)\)$", re.DOTALL)
UNIT_PATTERN = re.compile(r"^([a-zA-Z]+|%)$")


def format_number(value: int | float | Decimal) -> str:
    """
    Format a number the way it should appear in a stylesheet.

    Integral values lose their fractional part and exponent notation
    is never produced.

    Examples:
        format_number(360) -> "360"
        format_number(5.0) -> "5"
        format_number(3.125) -> "3.125"
        format_number(1e-7) -> "0.0000001"
    """
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        value = Decimal(repr(value))
    text = format(value.normalize(), "f")
    return "0" if text in ("-0", "") else text


def _to_number(text: str) -> int | float:
    if "." in text:
        return float(text)
    return int(text)


@dataclass(frozen=True)
class LiteralValue:
    """
    A number with an optional unit, e.g. ``24px``, ``0.2s`` or ``360``.

    Immutable and hashable.
    """

    number: int | float
    unit: str | None = None

    @property
    def is_zero(self) -> bool:
        return self.number == 0

    def with_unit(self, unit: str) -> LiteralValue:
        """Return a copy carrying a different unit."""
        return LiteralValue(self.number, unit)

    def to_css(self) -> str:
        return f"{format_number(self.number)}{self.unit or ''}"

    def __str__(self) -> str:
        return self.to_css()


@dataclass(frozen=True)
class TokenRef:
    """A named key to be looked up in one of the token tables."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Calculation:
    """
    A CSS function call such as ``clamp(16px, 24px, 32px)``.

    Arguments are kept as raw text in call order so they can be written
    back verbatim.
    """

    name: str
    args: tuple[str, ...]

    def with_argument(self, index: int, value: str) -> Calculation:
        """
        Return a copy with the argument at ``index`` (0-based) replaced.

        Raises:
            IndexError: If the call has no argument at that index
        """
        if not 0 <= index < len(self.args):
            raise IndexError(f"{self.name}() has no argument at index {index}")
        args = list(self.args)
        args[index] = value
        return Calculation(self.name, tuple(args))

    def to_css(self) -> str:
        return f"{self.name}({', '.join(self.args)})"

    def __str__(self) -> str:
        return self.to_css()


CssValue = LiteralValue | TokenRef | Calculation


def split_arguments(text: str) -> list[str]:
    """
    Split a function's argument text on top-level commas.

    Commas inside nested parentheses belong to the nested call:
    ``"16px, min(2vw, 24px), 32px"`` splits into three arguments.

    Raises:
        InvalidValue: If the parentheses do not balance
    """
    if not text.strip():
        return []

    args: list[str] = []
    depth = 0
    current: list[str] = []
    for char in text:
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                raise InvalidValue(text)
        elif char == "," and depth == 0:
            args.append("".join(current).strip())
            current = []
            continue
        current.append(char)

    if depth != 0:
        raise InvalidValue(text)

    args.append("".join(current).strip())
    return args


def parse_value(raw: object) -> CssValue:
    """
    Classify a raw input into a CSS value variant.

    Args:
        raw: A number, or a string holding a literal, a token name
            or a function call

    Returns:
        LiteralValue, TokenRef or Calculation

    Raises:
        InvalidValue: If the input fits none of the variants
    """
    # bool is an int subclass but never a meaningful CSS value
    if isinstance(raw, bool):
        raise InvalidValue(raw)

    if isinstance(raw, (int, float)):
        if not math.isfinite(raw):
            raise InvalidValue(raw)
        return LiteralValue(raw)

    if not isinstance(raw, str):
        raise InvalidValue(raw)

    text = raw.strip()
    if not text:
        raise InvalidValue(raw)

    number_match = NUMBER_PATTERN.match(text)
    if number_match:
        number, unit = number_match.groups()
        return LiteralValue(_to_number(number), unit.lower() if unit else None)

    call_match = CALL_PATTERN.match(text)
    if call_match:
        name, inner = call_match.groups()
        return Calculation(name.lower(), tuple(split_arguments(inner)))

    if IDENT_PATTERN.match(text):
        return TokenRef(text)

    raise InvalidValue(raw)


def unit_symbol(unit: object) -> str:
    """
    Extract the unit identifier from ``"vw"`` or a zero literal like ``"0vw"``.

    Raises:
        InvalidUnit: If no unit identifier can be extracted
    """
    if not isinstance(unit, str):
        raise InvalidUnit(unit)

    text = unit.strip()
    if UNIT_PATTERN.match(text):
        return text.lower()

    number_match = NUMBER_PATTERN.match(text)
    if number_match and number_match.group(2) and float(number_match.group(1)) == 0:
        return number_match.group(2).lower()

    raise InvalidUnit(unit)
