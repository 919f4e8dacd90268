"""
Pydantic models for the CSS helpers.

This module provides:
- TokenSet: Duration, easing and reference-width lookup tables
- TokenSetMetadata: Lightweight listing record
- Declarations: Property block written by the side-effecting helpers
"""

from chuk_mcp_css.models.declarations import Declarations
from chuk_mcp_css.models.tokens import (
    DEFAULT_TOKENS,
    TokenSet,
    TokenSetMetadata,
    parse_cubic_bezier,
)

__all__ = [
    "DEFAULT_TOKENS",
    "Declarations",
    "TokenSet",
    "TokenSetMetadata",
    "parse_cubic_bezier",
]
