"""
Constants and enums for the CSS helpers.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal


class TokenTable(str, Enum):
    """The lookup tables a token set carries."""

    DURATIONS = "durations"
    DURATION_ALIASES = "duration_aliases"
    EASINGS = "easings"
    EASING_ALIASES = "easing_aliases"
    WIDTHS = "widths"


class TimeUnit(str, Enum):
    """CSS time units accepted as duration literals."""

    MS = "ms"
    S = "s"


# Declaration properties written by the side-effecting helpers
TRANSITION_PROPERTY = "transition"
FONT_SIZE_PROPERTY = "font-size"

# Prefix of easing literals passed through untouched
CUBIC_BEZIER_PREFIX = "cubic-bezier"

# Unit the size converter accepts and the unit it emits by default
PIXEL_UNIT = "px"
DEFAULT_RELATIVE_UNIT = "vw"
DEFAULT_DECIMAL = 1

# Defaults of the transition entry point
DEFAULT_DURATION = "normal"
DEFAULT_EASING = "ease-out"

# Environment variable overriding the project token set directory
TOKENS_DIR_ENV = "CHUK_MCP_CSS_TOKENS_DIR"

# Schema versions - frozen for v1
SchemaVersion = Literal["tokens/v1"]


class ErrorMessages:
    """Standardized error messages."""

    INVALID_VALUE = "Invalid CSS value: {value!r}."
    INVALID_DURATION = "Invalid duration: {value!r}. Expected a duration token or a time literal."
    INVALID_EASING = "Invalid easing: {value!r}. Expected an easing token or a cubic-bezier()."
    INVALID_PROPERTY = "Invalid transition property: {value!r}."
    INVALID_WIDTH = "Invalid reference width: {value!r}. Expected a width token or a positive px value."
    INVALID_SIZE = "Invalid size: {value!r}. Expected a px value or a calculation with a px size."
    INVALID_UNIT = "Invalid unit: {value!r}. Expected a CSS unit identifier like 'vw'."
    INVALID_PRECISION = "Invalid decimal precision: {value!r}. Must be >= 0."
    TOKEN_SET_NOT_FOUND = "Token set '{name}' not found."


class SuccessMessages:
    """Standardized success messages."""

    TOKEN_SET_COPIED = "Copied token set '{name}' to {path}."
