"""
CHUK CSS - design-token helpers for authoring CSS values.

- transition(): compose a transition value from duration/easing tokens
- rpx(): convert a px size into a unit relative to a design width
"""

from chuk_mcp_css.errors import (
    CssHelperError,
    InvalidDuration,
    InvalidEasing,
    InvalidPrecision,
    InvalidProperty,
    InvalidSize,
    InvalidTimingFunction,
    InvalidUnit,
    InvalidValue,
    InvalidWidth,
)
from chuk_mcp_css.models import DEFAULT_TOKENS, Declarations, TokenSet
from chuk_mcp_css.transition import (
    TransitionComposer,
    apply_transition,
    duration,
    easing,
    timing_function,
    transition,
)
from chuk_mcp_css.typography import RpxConverter, apply_rpx, rpx

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_TOKENS",
    "CssHelperError",
    "Declarations",
    "InvalidDuration",
    "InvalidEasing",
    "InvalidPrecision",
    "InvalidProperty",
    "InvalidSize",
    "InvalidTimingFunction",
    "InvalidUnit",
    "InvalidValue",
    "InvalidWidth",
    "RpxConverter",
    "TokenSet",
    "TransitionComposer",
    "apply_rpx",
    "apply_transition",
    "duration",
    "easing",
    "rpx",
    "timing_function",
    "transition",
]
