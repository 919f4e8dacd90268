"""
Typography helpers - responsive font sizes against a reference width.
"""

from chuk_mcp_css.typography.rpx import (
    RpxConverter,
    apply_rpx,
    resolve_width,
    round_half_up,
    rpx,
)

__all__ = [
    "RpxConverter",
    "apply_rpx",
    "resolve_width",
    "round_half_up",
    "rpx",
]
