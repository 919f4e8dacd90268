"""
Responsive size converter - fixed px sizes to viewport-relative units.

A size is scaled against a reference design width:

    result = size / width * 100

so 24px on a 768px design becomes 3.125vw. When the size is wrapped in
a calculation such as ``clamp(16px, 24px, 32px)`` only the second
argument is converted; the other arguments are written back verbatim.
"""

from __future__ import annotations

import logging
from decimal import ROUND_HALF_UP, Decimal, localcontext

from chuk_mcp_css.constants import (
    DEFAULT_DECIMAL,
    DEFAULT_RELATIVE_UNIT,
    FONT_SIZE_PROPERTY,
    PIXEL_UNIT,
)
from chuk_mcp_css.core.values import (
    Calculation,
    CssValue,
    LiteralValue,
    TokenRef,
    format_number,
    parse_value,
    unit_symbol,
)
from chuk_mcp_css.errors import (
    CssHelperError,
    InvalidPrecision,
    InvalidSize,
    InvalidValue,
    InvalidWidth,
)
from chuk_mcp_css.models.declarations import Declarations
from chuk_mcp_css.models.tokens import DEFAULT_TOKENS, TokenSet

logger = logging.getLogger(__name__)

# 0-based position of the size inside min()/max()/clamp()
SIZE_ARGUMENT_INDEX = 1

SizeInput = str | int | float


def _parse(value: object, error: type[CssHelperError]) -> CssValue:
    try:
        return parse_value(value)
    except InvalidValue as e:
        raise error(value) from e


def round_half_up(value: float, decimal: int) -> Decimal:
    """
    Round to ``decimal`` fractional digits, halves rounding away from zero.

    Works on the float's shortest repr, so 3.125 rounds to 3.13 rather
    than to whatever its binary expansion suggests.
    """
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # Enough digits for every integral digit plus the requested fraction
        ctx.prec = max(ctx.prec, exact.adjusted() + decimal + 2)
        quantum = Decimal(1).scaleb(-decimal)
        return exact.quantize(quantum, rounding=ROUND_HALF_UP)


class RpxConverter:
    """
    Converts px sizes to a unit relative to a reference width.

    Width tokens resolve through the token set's width table; anything
    else is read as a literal px width.
    """

    def __init__(self, tokens: TokenSet = DEFAULT_TOKENS):
        """
        Initialize the converter with a token set.

        Args:
            tokens: Lookup tables holding the reference widths
        """
        self.tokens = tokens

    def resolve_width(self, width: SizeInput) -> int | float:
        """
        Resolve a width token or px literal to a positive number of px.

        Raises:
            InvalidWidth: If the token is unknown, the unit is not px,
                or the width is not positive
        """
        parsed = _parse(width, InvalidWidth)

        if isinstance(parsed, TokenRef):
            if parsed.name not in self.tokens.widths:
                raise InvalidWidth(width)
            px = self.tokens.widths[parsed.name]
        elif isinstance(parsed, LiteralValue) and parsed.unit in (None, PIXEL_UNIT):
            px = parsed.number
        else:
            raise InvalidWidth(width)

        if px <= 0:
            raise InvalidWidth(width)
        return px

    def rpx(
        self,
        px: SizeInput,
        width: SizeInput,
        unit: str = DEFAULT_RELATIVE_UNIT,
        decimal: int = DEFAULT_DECIMAL,
    ) -> str:
        """
        Convert a px size to a width-relative value.

        Args:
            px: Size in px ('24px', 24) or a calculation wrapping one
                ('clamp(16px, 24px, 32px)')
            width: Width token ('mp') or px width ('1024px', 1024)
            unit: Target unit identifier, or a zero literal of it ('0vw')
            decimal: Fractional digits to round to; 0 disables rounding

        Returns:
            e.g. '3.1vw' or 'clamp(16px, 3.1vw, 32px)'

        Raises:
            InvalidWidth, InvalidSize, InvalidUnit, InvalidPrecision
        """
        reference = self.resolve_width(width)
        symbol = unit_symbol(unit)
        if isinstance(decimal, bool) or not isinstance(decimal, int) or decimal < 0:
            raise InvalidPrecision(decimal)

        result = self._convert(_parse(px, InvalidSize), px, reference, symbol, decimal)
        logger.debug(f"rpx({px!r}, {width!r}) -> {result}")
        return result

    def apply_rpx(
        self,
        target: Declarations,
        px: SizeInput,
        width: SizeInput,
        unit: str = DEFAULT_RELATIVE_UNIT,
        decimal: int = DEFAULT_DECIMAL,
    ) -> None:
        """Assign a converted size to the target's 'font-size' property."""
        target.set(FONT_SIZE_PROPERTY, self.rpx(px, width, unit, decimal))

    def _convert(
        self,
        parsed: CssValue,
        raw: SizeInput,
        reference: int | float,
        symbol: str,
        decimal: int,
    ) -> str:
        if isinstance(parsed, Calculation):
            if len(parsed.args) <= SIZE_ARGUMENT_INDEX:
                raise InvalidSize(raw)
            inner_raw = parsed.args[SIZE_ARGUMENT_INDEX]
            # Nested calls recurse so the innermost size is converted
            converted = self._convert(
                _parse(inner_raw, InvalidSize), inner_raw, reference, symbol, decimal
            )
            return parsed.with_argument(SIZE_ARGUMENT_INDEX, converted).to_css()

        if not isinstance(parsed, LiteralValue) or parsed.unit not in (None, PIXEL_UNIT):
            raise InvalidSize(raw)

        result = parsed.number / reference * 100
        if decimal > 0:
            return f"{format_number(round_half_up(result, decimal))}{symbol}"
        return f"{format_number(result)}{symbol}"


# Module-level API over the default token set

_default_converter = RpxConverter()


def resolve_width(width: SizeInput) -> int | float:
    return _default_converter.resolve_width(width)


def rpx(
    px: SizeInput,
    width: SizeInput,
    unit: str = DEFAULT_RELATIVE_UNIT,
    decimal: int = DEFAULT_DECIMAL,
) -> str:
    """Convert a px size against the default width table."""
    return _default_converter.rpx(px, width, unit, decimal)


def apply_rpx(
    target: Declarations,
    px: SizeInput,
    width: SizeInput,
    unit: str = DEFAULT_RELATIVE_UNIT,
    decimal: int = DEFAULT_DECIMAL,
) -> None:
    """Assign a font-size converted against the default width table."""
    _default_converter.apply_rpx(target, px, width, unit, decimal)
