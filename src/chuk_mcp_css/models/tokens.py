"""
Token set models - the lookup tables the helpers resolve names against.

A token set bundles the duration, easing and reference-width tables.
Token sets are immutable: override a table by building a new set, never
by mutating a shared one.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from chuk_mcp_css.constants import SchemaVersion, TokenTable

CUBIC_BEZIER_PATTERN = re.compile(r"^cubic-bezier\(([^()]*)\)$")

# Milliseconds, five steps per tier
DEFAULT_DURATIONS: dict[str, int] = {
    "short1": 40,
    "short2": 80,
    "short3": 120,
    "short4": 160,
    "short5": 200,
    "medium1": 240,
    "medium2": 280,
    "medium3": 320,
    "medium4": 360,
    "medium5": 400,
    "long1": 450,
    "long2": 500,
    "long3": 550,
    "long4": 600,
    "long5": 650,
    "extra-long1": 700,
    "extra-long2": 800,
    "extra-long3": 900,
    "extra-long4": 1000,
    "extra-long5": 1100,
}

DEFAULT_DURATION_ALIASES: dict[str, str] = {
    "fast": "short4",
    "normal": "medium2",
    "slow": "long2",
}

DEFAULT_EASINGS: dict[str, str] = {
    "standard": "cubic-bezier(0.2, 0, 0, 1)",
    "standard-accelerate": "cubic-bezier(0.3, 0, 1, 1)",
    "standard-decelerate": "cubic-bezier(0, 0, 0, 1)",
    "emphasized": "cubic-bezier(0.2, 0, 0, 1)",
    "emphasized-accelerate": "cubic-bezier(0.3, 0, 0.8, 0.15)",
    "emphasized-decelerate": "cubic-bezier(0.05, 0.7, 0.1, 1)",
    "legacy": "cubic-bezier(0.4, 0, 0.2, 1)",
    "legacy-accelerate": "cubic-bezier(0.4, 0, 1, 1)",
    "legacy-decelerate": "cubic-bezier(0, 0, 0.2, 1)",
    "linear": "cubic-bezier(0, 0, 1, 1)",
}

DEFAULT_EASING_ALIASES: dict[str, str] = {
    "ease": "standard",
    "ease-in": "standard-accelerate",
    "ease-out": "standard-decelerate",
    "ease-in-out": "emphasized",
}

# Design widths in px
DEFAULT_WIDTHS: dict[str, int | float] = {
    "pc": 1920,
    "mp": 768,
}


def parse_cubic_bezier(curve: str) -> tuple[float, float, float, float]:
    """
    Parse a ``cubic-bezier(x1, y1, x2, y2)`` literal into its control points.

    Raises:
        ValueError: If the literal is malformed
    """
    match = CUBIC_BEZIER_PATTERN.match(curve.strip())
    if not match:
        raise ValueError(f"Invalid cubic-bezier format: {curve}")
    parts = [p.strip() for p in match.group(1).split(",")]
    if len(parts) != 4:
        raise ValueError(f"cubic-bezier requires 4 components, got {len(parts)}: {curve}")
    try:
        x1, y1, x2, y2 = (float(p) for p in parts)
    except ValueError as e:
        raise ValueError(f"Non-numeric cubic-bezier value in {curve}") from e
    return x1, y1, x2, y2


class TokenSet(BaseModel):
    """
    A bundle of lookup tables.

    Aliases resolve by indirection: every alias must name an entry that
    already exists in its primary table. Each table is exposed as a
    read-only mapping, so a shared token set cannot be edited in place.
    """

    # Metadata
    schema_version: SchemaVersion = Field("tokens/v1", alias="schema")
    name: str = Field("default", description="Token set name")
    description: str = Field("", description="Token set description")

    # Tables
    durations: dict[str, int | float] = Field(
        default_factory=lambda: dict(DEFAULT_DURATIONS),
        description="Duration tokens in milliseconds",
    )
    duration_aliases: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_DURATION_ALIASES),
        description="Friendly duration names pointing at duration tokens",
    )
    easings: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_EASINGS),
        description="Easing tokens as cubic-bezier() literals",
    )
    easing_aliases: dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_EASING_ALIASES),
        description="CSS keyword aliases pointing at easing tokens",
    )
    widths: dict[str, int | float] = Field(
        default_factory=lambda: dict(DEFAULT_WIDTHS),
        description="Reference design widths in px",
    )

    model_config = {"frozen": True, "populate_by_name": True, "validate_default": True}

    @field_validator("durations")
    @classmethod
    def validate_durations(cls, v: dict[str, int | float]) -> dict[str, int | float]:
        """Durations are non-negative milliseconds."""
        for token, ms in v.items():
            if ms < 0:
                raise ValueError(f"Duration '{token}' must be >= 0, got {ms}")
        return v

    @field_validator("easings")
    @classmethod
    def validate_easings(cls, v: dict[str, str]) -> dict[str, str]:
        """Easings are cubic-bezier() literals with four numeric points."""
        for curve in v.values():
            parse_cubic_bezier(curve)
        return v

    @field_validator("widths")
    @classmethod
    def validate_widths(cls, v: dict[str, int | float]) -> dict[str, int | float]:
        """Widths are positive pixel values."""
        for token, px in v.items():
            if px <= 0:
                raise ValueError(f"Width '{token}' must be > 0, got {px}")
        return v

    @field_validator("durations", "duration_aliases", "easings", "easing_aliases", "widths")
    @classmethod
    def freeze_table(cls, v: dict[str, Any]) -> Mapping[str, Any]:
        """Tables are read-only views over a private copy."""
        return MappingProxyType(dict(v))

    @model_validator(mode="after")
    def validate_aliases(self) -> TokenSet:
        """Ensure every alias points at an existing entry."""
        for alias, target in self.duration_aliases.items():
            if target not in self.durations:
                raise ValueError(f"Duration alias '{alias}' points at unknown token '{target}'")
        for alias, target in self.easing_aliases.items():
            if target not in self.easings:
                raise ValueError(f"Easing alias '{alias}' points at unknown token '{target}'")
        return self

    def get_table(self, table: TokenTable) -> Mapping[str, Any]:
        """Get a table by its enum name."""
        return getattr(self, table.value)

    def to_yaml_dict(self) -> dict[str, Any]:
        """Convert to YAML-serializable dictionary."""
        return {
            "schema": self.schema_version,
            "name": self.name,
            "description": self.description,
            "durations": dict(self.durations),
            "duration_aliases": dict(self.duration_aliases),
            "easings": dict(self.easings),
            "easing_aliases": dict(self.easing_aliases),
            "widths": dict(self.widths),
        }


class TokenSetMetadata(BaseModel):
    """Lightweight metadata for listing token sets."""

    name: str
    description: str
    table_sizes: dict[str, int]

    model_config = {"frozen": True}

    @classmethod
    def from_token_set(cls, tokens: TokenSet) -> TokenSetMetadata:
        """Create metadata from a token set."""
        return cls(
            name=tokens.name,
            description=tokens.description,
            table_sizes={table.value: len(tokens.get_table(table)) for table in TokenTable},
        )


DEFAULT_TOKENS = TokenSet(
    name="default",
    description="Material-style motion tokens with pc and mp reference widths",
)
