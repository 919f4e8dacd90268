"""
Transition helpers - duration/easing lookup and transition composition.
"""

from chuk_mcp_css.transition.composer import (
    TransitionComposer,
    apply_transition,
    compose,
    duration,
    easing,
    resolve_delay,
    resolve_duration,
    resolve_easing,
    resolve_timing_function,
    timing_function,
    transition,
)

__all__ = [
    "TransitionComposer",
    "apply_transition",
    "compose",
    "duration",
    "easing",
    "resolve_delay",
    "resolve_duration",
    "resolve_easing",
    "resolve_timing_function",
    "timing_function",
    "transition",
]
