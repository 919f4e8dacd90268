"""
Core CSS value primitives.

Inputs are classified before anything is resolved:
- LiteralValue: A number with an optional unit (24px, 0.2s, 360)
- TokenRef: A named key into one of the token tables (medium4, ease, mp)
- Calculation: A CSS function call with its ordered arguments (clamp(...))
"""

from chuk_mcp_css.core.values import (
    Calculation,
    CssValue,
    LiteralValue,
    TokenRef,
    format_number,
    parse_value,
    split_arguments,
    unit_symbol,
)

__all__ = [
    "Calculation",
    "CssValue",
    "LiteralValue",
    "TokenRef",
    "format_number",
    "parse_value",
    "split_arguments",
    "unit_symbol",
]
