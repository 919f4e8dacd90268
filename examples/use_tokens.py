#!/usr/bin/env python3
"""
Example: Using token sets to author CSS values.

This demonstrates composing transitions from duration/easing tokens and
converting fixed px font sizes into viewport-relative units.

Usage:
    python examples/use_tokens.py
"""

import tempfile
from pathlib import Path

from chuk_mcp_css.errors import CssHelperError
from chuk_mcp_css.models import Declarations
from chuk_mcp_css.tokens import TokenLoader
from chuk_mcp_css.transition import TransitionComposer
from chuk_mcp_css.typography import RpxConverter


def main() -> None:
    """Demonstrate the CSS helpers."""
    print("CHUK CSS Token Demo")
    print("=" * 40)
    print()

    with tempfile.TemporaryDirectory() as tmp:
        loader = TokenLoader(project_path=Path(tmp))

        # List available token sets
        print("Available token sets:")
        for meta in loader.list_token_sets():
            sizes = ", ".join(f"{table}={count}" for table, count in meta.table_sizes.items())
            print(f"  {meta.name}: {meta.description}")
            print(f"    {sizes}")
        print()

        tokens = loader.get_token_set("default")
        if not tokens:
            print("Failed to load token set")
            return

        composer = TransitionComposer(tokens)
        converter = RpxConverter(tokens)

        # Transitions
        print("Transitions:")
        print(f"  {composer.transition('opacity')}")
        print(f"  {composer.transition(['opacity', 'transform'], 'medium4', 'standard-decelerate')}")
        print(f"  {composer.transition('color', 'short2', 'ease-in', 'short1')}")
        print()

        # Responsive sizes
        print("Responsive sizes:")
        for px, width in [("24px", "mp"), ("48px", "pc"), ("clamp(16px, 24px, 32px)", "mp")]:
            print(f"  rpx({px}, {width}) = {converter.rpx(px, width)}")
        print()

        # Build a rule through the side-effecting helpers
        rule = Declarations(selector=".headline")
        converter.apply_rpx(rule, "clamp(20px, 32px, 48px)", "pc", decimal=2)
        composer.apply_transition(rule, "font-size", "long1", "emphasized")
        print("Rule:")
        print(rule.to_css())
        print()

        # Errors abort the value
        print("Invalid token:")
        try:
            composer.transition("opacity", "forever")
        except CssHelperError as e:
            print(f"  {type(e).__name__}: {e}")


if __name__ == "__main__":
    main()
