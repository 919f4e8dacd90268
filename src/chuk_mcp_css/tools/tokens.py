"""
Token tools - MCP tools for token set discovery and customization.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from chuk_mcp_css.constants import ErrorMessages, SuccessMessages
from chuk_mcp_css.tokens import TokenLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def register_token_tools(
    mcp: ChukMCPServer,
    token_loader: TokenLoader,
) -> dict[str, Any]:
    """
    Register token set tools with the MCP server.

    Args:
        mcp: The MCP server instance
        token_loader: The token set loader

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def css_list_token_sets() -> str:
        """
        List available token sets.

        Returns:
            JSON string with list of token set summaries

        Example:
            css_list_token_sets()
        """
        try:
            token_sets = token_loader.list_token_sets()

            return json.dumps(
                {
                    "status": "success",
                    "token_sets": [
                        {
                            "name": t.name,
                            "description": t.description,
                            "table_sizes": t.table_sizes,
                        }
                        for t in token_sets
                    ],
                    "count": len(token_sets),
                }
            )
        except Exception as e:
            logger.exception("Failed to list token sets")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_list_token_sets"] = css_list_token_sets

    @mcp.tool  # type: ignore[arg-type]
    async def css_describe_token_set(name: str) -> str:
        """
        Get every table of a token set.

        Args:
            name: Token set name

        Returns:
            JSON string with durations, easings, aliases and widths

        Example:
            css_describe_token_set(name="default")
        """
        try:
            tokens = token_loader.get_token_set(name)
            if tokens is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TOKEN_SET_NOT_FOUND.format(name=name)}
                )

            return json.dumps({"status": "success", "token_set": tokens.to_yaml_dict()})
        except Exception as e:
            logger.exception("Failed to describe token set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_describe_token_set"] = css_describe_token_set

    @mcp.tool  # type: ignore[arg-type]
    async def css_copy_token_set_to_project(name: str) -> str:
        """
        Copy a library token set to the project for customization.

        Args:
            name: Token set name

        Returns:
            JSON string with path to copied token set

        Example:
            css_copy_token_set_to_project(name="default")
        """
        try:
            path = token_loader.copy_to_project(name)
            if path is None:
                return json.dumps(
                    {"status": "error", "message": ErrorMessages.TOKEN_SET_NOT_FOUND.format(name=name)}
                )

            return json.dumps(
                {
                    "status": "success",
                    "message": SuccessMessages.TOKEN_SET_COPIED.format(name=name, path=path),
                    "path": str(path),
                    "hint": "Edit the YAML file; a table you define replaces the default table",
                }
            )
        except ValueError as e:
            return json.dumps({"status": "error", "message": str(e)})
        except Exception as e:
            logger.exception("Failed to copy token set")
            return json.dumps({"status": "error", "message": str(e)})

    tools["css_copy_token_set_to_project"] = css_copy_token_set_to_project

    return tools
