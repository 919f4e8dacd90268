"""
Transition composer - resolves timing tokens into a CSS transition value.

The composer turns a duration, an easing and a delay (tokens or raw
literals) into the shorthand fragment ``<duration> <easing> <delay>``
and combines it with one or more property names.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from chuk_mcp_css.constants import (
    CUBIC_BEZIER_PREFIX,
    DEFAULT_DURATION,
    DEFAULT_EASING,
    TRANSITION_PROPERTY,
    TimeUnit,
)
from chuk_mcp_css.core.values import (
    CssValue,
    LiteralValue,
    TokenRef,
    format_number,
    parse_value,
)
from chuk_mcp_css.errors import (
    CssHelperError,
    InvalidDuration,
    InvalidEasing,
    InvalidProperty,
    InvalidValue,
)
from chuk_mcp_css.models.declarations import Declarations
from chuk_mcp_css.models.tokens import DEFAULT_TOKENS, TokenSet

logger = logging.getLogger(__name__)

TIME_UNITS = frozenset(unit.value for unit in TimeUnit)

Props = str | Sequence[str]
TimeInput = str | int | float | None


def _parse(value: object, error: type[CssHelperError]) -> CssValue:
    try:
        return parse_value(value)
    except InvalidValue as e:
        raise error(value) from e


class TransitionComposer:
    """
    Composes CSS transition values from a token set.

    Duration lookup tries the duration table, then the duration aliases.
    Easing lookup tries the easing table, then the easing aliases.
    A literal is never looked up and a token is never read as a number.
    """

    def __init__(self, tokens: TokenSet = DEFAULT_TOKENS):
        """
        Initialize the composer with a token set.

        Args:
            tokens: Lookup tables to resolve names against
        """
        self.tokens = tokens

    def resolve_duration(self, value: TimeInput) -> str:
        """
        Resolve a duration token or literal to a CSS time value.

        Time literals come back exactly as written, negative ones included.

        Args:
            value: Token name ('medium4'), bare number (360) or
                time literal ('360ms', '0.2s')

        Returns:
            Time value such as '360ms'

        Raises:
            InvalidDuration: If the token is unknown or the literal is
                not a time
        """
        parsed = _parse(value, InvalidDuration)

        if isinstance(parsed, LiteralValue):
            if parsed.unit is None:
                return parsed.with_unit(TimeUnit.MS.value).to_css()
            if parsed.unit not in TIME_UNITS:
                raise InvalidDuration(value)
            return str(value).strip()

        if isinstance(parsed, TokenRef):
            ms = self._lookup_duration(parsed.name)
            if ms is None:
                raise InvalidDuration(value)
            resolved = f"{format_number(ms)}{TimeUnit.MS.value}"
            logger.debug(f"Resolved duration '{parsed.name}' -> {resolved}")
            return resolved

        raise InvalidDuration(value)

    def resolve_easing(self, value: str) -> str:
        """
        Resolve an easing token to a cubic-bezier() literal.

        Strings starting with 'cubic-bezier' are returned unmodified apart
        from surrounding whitespace.

        Raises:
            InvalidEasing: If the token is in neither easing table
        """
        if isinstance(value, str) and value.strip().startswith(CUBIC_BEZIER_PREFIX):
            return value.strip()

        parsed = _parse(value, InvalidEasing)
        if not isinstance(parsed, TokenRef):
            raise InvalidEasing(value)

        name = parsed.name
        if name in self.tokens.easings:
            resolved = self.tokens.easings[name]
        elif name in self.tokens.easing_aliases:
            resolved = self.tokens.easings[self.tokens.easing_aliases[name]]
        else:
            raise InvalidEasing(value)

        logger.debug(f"Resolved easing '{name}' -> {resolved}")
        return resolved

    resolve_timing_function = resolve_easing

    def resolve_delay(self, value: TimeInput) -> str:
        """
        Resolve a delay, rendering zero or empty delays as ''.

        Raises:
            InvalidDuration: If a non-zero delay does not resolve
        """
        if not value:
            return ""
        parsed = _parse(value, InvalidDuration)
        if isinstance(parsed, LiteralValue) and parsed.is_zero:
            return ""
        return self.resolve_duration(value)

    def compose(
        self,
        props: Props,
        duration: TimeInput,
        easing: str,
        delay: TimeInput = 0,
    ) -> str:
        """
        Compose a transition value for one or more properties.

        Timing is resolved once and shared by every property.

        Args:
            props: A property name or a sequence of property names
            duration: Duration token or literal
            easing: Easing token or cubic-bezier() literal
            delay: Delay token or literal; falsy for no delay

        Returns:
            e.g. 'opacity 360ms cubic-bezier(0, 0, 0, 1), transform 360ms cubic-bezier(0, 0, 0, 1)'
        """
        names = self._property_names(props)
        timing = " ".join(
            part
            for part in (
                self.resolve_duration(duration),
                self.resolve_easing(easing),
                self.resolve_delay(delay),
            )
            if part
        )
        return ", ".join(f"{name} {timing}" for name in names)

    def transition(
        self,
        props: Props,
        duration: TimeInput = DEFAULT_DURATION,
        easing: str = DEFAULT_EASING,
        delay: TimeInput = 0,
    ) -> str:
        """Build a transition value with the default timing tokens."""
        return self.compose(props, duration, easing, delay)

    def apply_transition(
        self,
        target: Declarations,
        props: Props,
        duration: TimeInput = DEFAULT_DURATION,
        easing: str = DEFAULT_EASING,
        delay: TimeInput = 0,
    ) -> None:
        """Assign a transition value to the target's 'transition' property."""
        target.set(TRANSITION_PROPERTY, self.transition(props, duration, easing, delay))

    def _lookup_duration(self, name: str) -> int | float | None:
        if name in self.tokens.durations:
            return self.tokens.durations[name]
        if name in self.tokens.duration_aliases:
            return self.tokens.durations[self.tokens.duration_aliases[name]]
        return None

    def _property_names(self, props: Props) -> list[str]:
        if isinstance(props, str):
            names = [props]
        elif isinstance(props, Sequence):
            names = list(props)
        else:
            raise InvalidProperty(props)

        if not names:
            raise InvalidProperty(props)
        for name in names:
            if not isinstance(name, str) or not name.strip():
                raise InvalidProperty(props)
        return [name.strip() for name in names]


# Module-level API over the default token set

_default_composer = TransitionComposer()


def resolve_duration(value: TimeInput) -> str:
    return _default_composer.resolve_duration(value)


def resolve_easing(value: str) -> str:
    return _default_composer.resolve_easing(value)


def resolve_timing_function(value: str) -> str:
    return _default_composer.resolve_timing_function(value)


def resolve_delay(value: TimeInput) -> str:
    return _default_composer.resolve_delay(value)


def compose(props: Props, duration: TimeInput, easing: str, delay: TimeInput = 0) -> str:
    return _default_composer.compose(props, duration, easing, delay)


def transition(
    props: Props,
    duration: TimeInput = DEFAULT_DURATION,
    easing: str = DEFAULT_EASING,
    delay: TimeInput = 0,
) -> str:
    """Build a transition value against the default token set."""
    return _default_composer.transition(props, duration, easing, delay)


def apply_transition(
    target: Declarations,
    props: Props,
    duration: TimeInput = DEFAULT_DURATION,
    easing: str = DEFAULT_EASING,
    delay: TimeInput = 0,
) -> None:
    """Assign a transition built against the default token set."""
    _default_composer.apply_transition(target, props, duration, easing, delay)


# Short names matching the stylesheet function names
duration = resolve_duration
easing = resolve_easing
timing_function = resolve_timing_function
