"""
Transition tools - MCP tools for timing tokens and transition values.

Tools for resolving durations and easings and composing transition
shorthand values against a token set.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_css.constants import DEFAULT_DURATION, DEFAULT_EASING, ErrorMessages
from chuk_mcp_css.errors import CssHelperError
from chuk_mcp_css.tokens import TokenLoader
from chuk_mcp_css.transition import TransitionComposer

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_transition_tools(
    mcp: ChukMCPServer,
    token_loader: TokenLoader,
) -> dict[str, Any]:
    """
    Register transition tools with the MCP server.

    Args:
        mcp: The MCP server instance
        token_loader: The token set loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def _composer(token_set: str) -> TransitionComposer | None:
        tokens = token_loader.get_token_set(token_set)
        if tokens is None:
            return None
        return TransitionComposer(tokens)

    def _not_found(token_set: str) -> str:
        return json.dumps(
            {"status": "error", "message": ErrorMessages.TOKEN_SET_NOT_FOUND.format(name=token_set)}
        )

    @mcp.tool  # type: ignore[arg-type]
    async def css_transition(
        props: str | list[str],
        duration: str = DEFAULT_DURATION,
        easing: str = DEFAULT_EASING,
        delay: str | None = None,
        token_set: str = "default",
    ) -> str:
        """
        Compose a CSS transition value.

        Every property shares the same duration, easing and delay.

        Args:
            props: Property name or list of property names
            duration: Duration token (e.g., 'medium4', 'normal') or literal ('200ms')
            easing: Easing token (e.g., 'standard', 'ease-out') or cubic-bezier()
            delay: Optional delay token or literal
            token_set: Token set to resolve against

        Returns:
            JSON string with the transition value and declaration

        Example:
            css_transition(props=["opacity", "transform"], duration="medium4")
        """
        try:
            composer = _composer(token_set)
            if composer is None:
                return _not_found(token_set)

            value = composer.transition(props, duration, easing, delay)
            return json.dumps(
                {
                    "status": "success",
                    "value": value,
                    "declaration": f"transition: {value};",
                }
            )
        except CssHelperError as e:
            return json.dumps({"status": "error", "error": type(e).__name__, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to compose transition")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_transition"] = css_transition

    @mcp.tool  # type: ignore[arg-type]
    async def css_duration(value: str, token_set: str = "default") -> str:
        """
        Resolve a duration token or literal.

        Args:
            value: Duration token (e.g., 'short2') or literal (e.g., '150', '0.2s')
            token_set: Token set to resolve against

        Returns:
            JSON string with the resolved time value

        Example:
            css_duration(value="medium4")
        """
        try:
            composer = _composer(token_set)
            if composer is None:
                return _not_found(token_set)

            return json.dumps(
                {"status": "success", "input": value, "value": composer.resolve_duration(value)}
            )
        except CssHelperError as e:
            return json.dumps({"status": "error", "error": type(e).__name__, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to resolve duration")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_duration"] = css_duration

    @mcp.tool  # type: ignore[arg-type]
    async def css_easing(value: str, token_set: str = "default") -> str:
        """
        Resolve an easing token or alias to a cubic-bezier() value.

        Args:
            value: Easing token (e.g., 'emphasized'), alias (e.g., 'ease-in')
                or a cubic-bezier() literal
            token_set: Token set to resolve against

        Returns:
            JSON string with the resolved timing function

        Example:
            css_easing(value="ease-in-out")
        """
        try:
            composer = _composer(token_set)
            if composer is None:
                return _not_found(token_set)

            return json.dumps(
                {"status": "success", "input": value, "value": composer.resolve_easing(value)}
            )
        except CssHelperError as e:
            return json.dumps({"status": "error", "error": type(e).__name__, "message": str(e)})
        except Exception as e:
            logger.exception("Failed to resolve easing")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_easing"] = css_easing

    return tools
