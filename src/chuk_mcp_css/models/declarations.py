"""
Declaration block - the target the side-effecting helpers write into.

A block is an optional selector plus an ordered set of property
assignments, the Python stand-in for the rule a mixin is included in.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator


class Declarations(BaseModel):
    """
    An ordered block of CSS property assignments.

    Reassigning a property replaces its value but keeps its position,
    so the last write wins.
    """

    selector: str | None = Field(None, description="Rule selector, e.g. '.title'")
    properties: dict[str, str] = Field(
        default_factory=dict, description="Property name to value, in declaration order"
    )

    @field_validator("properties")
    @classmethod
    def validate_properties(cls, v: dict[str, str]) -> dict[str, str]:
        """Property names must not be blank."""
        for prop in v:
            if not prop.strip():
                raise ValueError("Property names must not be blank")
        return v

    def set(self, prop: str, value: str) -> None:
        """Assign a property."""
        if not prop.strip():
            raise ValueError("Property names must not be blank")
        self.properties[prop.strip()] = value

    def get(self, prop: str) -> str | None:
        """Get a property's value, or None if it is not set."""
        return self.properties.get(prop)

    def remove(self, prop: str) -> bool:
        """Remove a property. Returns True if it was set."""
        return self.properties.pop(prop, None) is not None

    def __contains__(self, prop: object) -> bool:
        return prop in self.properties

    def __len__(self) -> int:
        return len(self.properties)

    def to_css(self, indent: str = "  ") -> str:
        """
        Render the block as CSS text.

        Without a selector only the declaration lines are emitted.
        """
        lines = [f"{prop}: {value};" for prop, value in self.properties.items()]
        if self.selector is None:
            return "\n".join(lines)
        if not lines:
            return f"{self.selector} {{}}"
        body = "\n".join(f"{indent}{line}" for line in lines)
        return f"{self.selector} {{\n{body}\n}}"
