"""
Errors raised while resolving tokens and converting values.

Every error is a ValueError so callers that already guard against bad
input keep working. Nothing here is transient: an error aborts the
declaration being built.
"""

from __future__ import annotations

from typing import Any

from chuk_mcp_css.constants import ErrorMessages


class CssHelperError(ValueError):
    """Base class for all CSS helper errors."""

    template = ErrorMessages.INVALID_VALUE

    def __init__(self, value: Any):
        self.value = value
        super().__init__(self.template.format(value=value))


class InvalidValue(CssHelperError):
    """Input could not be classified as a literal, token or calculation."""


class InvalidDuration(CssHelperError):
    """Duration token missing from the duration tables, or a malformed literal."""

    template = ErrorMessages.INVALID_DURATION


class InvalidEasing(CssHelperError):
    """Easing token missing from both easing tables."""

    template = ErrorMessages.INVALID_EASING


InvalidTimingFunction = InvalidEasing


class InvalidProperty(CssHelperError):
    """Empty property name or property list."""

    template = ErrorMessages.INVALID_PROPERTY


class InvalidWidth(CssHelperError):
    """Unknown width token, non-px width, or a width that is not positive."""

    template = ErrorMessages.INVALID_WIDTH


class InvalidSize(CssHelperError):
    """Size is not a px value, or a calculation has no second argument."""

    template = ErrorMessages.INVALID_SIZE


class InvalidUnit(CssHelperError):
    """Target unit is not a CSS unit identifier."""

    template = ErrorMessages.INVALID_UNIT


class InvalidPrecision(CssHelperError):
    """Negative rounding precision."""

    template = ErrorMessages.INVALID_PRECISION
