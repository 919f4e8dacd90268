"""
Typography tools - MCP tools for responsive font sizes.

Tools for converting px sizes to width-relative units and for building
a rule that carries the converted font-size.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_css.constants import (
    DEFAULT_DECIMAL,
    DEFAULT_DURATION,
    DEFAULT_EASING,
    DEFAULT_RELATIVE_UNIT,
    ErrorMessages,
)
from chuk_mcp_css.errors import CssHelperError
from chuk_mcp_css.models.declarations import Declarations
from chuk_mcp_css.tokens import TokenLoader
from chuk_mcp_css.transition import TransitionComposer
from chuk_mcp_css.typography import RpxConverter

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_typography_tools(
    mcp: ChukMCPServer,
    token_loader: TokenLoader,
) -> dict[str, Any]:
    """
    Register typography tools with the MCP server.

    Args:
        mcp: The MCP server instance
        token_loader: The token set loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def _not_found(token_set: str) -> str:
        return json.dumps(
            {"status": "error", "message": ErrorMessages.TOKEN_SET_NOT_FOUND.format(name=token_set)}
        )

    @mcp.tool  # type: ignore[arg-type]
    async def css_rpx(
        px: str,
        width: str,
        unit: str = DEFAULT_RELATIVE_UNIT,
        decimal: int = DEFAULT_DECIMAL,
        token_set: str = "default",
    ) -> str:
        """
        Convert a px size into a unit relative to a reference width.

        Calculations like clamp(16px, 24px, 32px) convert only their
        second argument.

        Args:
            px: Size in px (e.g., '24px') or a min()/max()/clamp() wrapping one
            width: Width token (e.g., 'mp', 'pc') or px width (e.g., '1024px')
            unit: Target unit (default: vw)
            decimal: Fractional digits to round to; 0 keeps full precision
            token_set: Token set holding the width table

        Returns:
            JSON string with the converted value

        Example:
            css_rpx(px="clamp(16px, 24px, 32px)", width="mp")
        """
        try:
            tokens = token_loader.get_token_set(token_set)
            if tokens is None:
                return _not_found(token_set)

            converter = RpxConverter(tokens)
            return json.dumps(
                {
                    "status": "success",
                    "input": px,
                    "width_px": converter.resolve_width(width),
                    "value": converter.rpx(px, width, unit, decimal),
                }
            )
        except CssHelperError as e:
            return json.dumps({"status": "error", "error": type(e).__name__, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to convert size")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_rpx"] = css_rpx

    @mcp.tool  # type: ignore[arg-type]
    async def css_font_size_rule(
        selector: str,
        px: str,
        width: str,
        unit: str = DEFAULT_RELATIVE_UNIT,
        decimal: int = DEFAULT_DECIMAL,
        transition_props: list[str] | None = None,
        duration: str = DEFAULT_DURATION,
        easing: str = DEFAULT_EASING,
        token_set: str = "default",
    ) -> str:
        """
        Build a CSS rule with a responsive font-size.

        Optionally adds a transition for the given properties, so a
        size change can animate.

        Args:
            selector: Rule selector (e.g., '.title')
            px: Size in px or a calculation wrapping one
            width: Width token or px width
            unit: Target unit (default: vw)
            decimal: Fractional digits to round to
            transition_props: Properties to transition (e.g., ['font-size'])
            duration: Transition duration token or literal
            easing: Transition easing token or cubic-bezier()
            token_set: Token set to resolve against

        Returns:
            JSON string with the rule's properties and CSS text

        Example:
            css_font_size_rule(selector=".title", px="24px", width="mp",
                               transition_props=["font-size"])
        """
        try:
            tokens = token_loader.get_token_set(token_set)
            if tokens is None:
                return _not_found(token_set)

            rule = Declarations(selector=selector)
            RpxConverter(tokens).apply_rpx(rule, px, width, unit, decimal)
            if transition_props:
                TransitionComposer(tokens).apply_transition(
                    rule, transition_props, duration, easing
                )

            return json.dumps(
                {
                    "status": "success",
                    "selector": selector,
                    "properties": rule.properties,
                    "css": rule.to_css(),
                }
            )
        except CssHelperError as e:
            return json.dumps({"status": "error", "error": type(e).__name__, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to build font-size rule")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_font_size_rule"] = css_font_size_rule

    return tools
