#!/usr/bin/env python3
"""
Async CSS helpers MCP Server using chuk-mcp-server

This server provides MCP tools for authoring CSS values from design
tokens. Token sets live in YAML files - you can copy a library set into
your project and customize its tables.

The server provides tools for:
- Resolving duration and easing tokens
- Composing transition shorthand values
- Converting px font sizes to viewport-relative units
- Token set discovery and customization
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_css.constants import TOKENS_DIR_ENV
from chuk_mcp_css.tokens import TokenLoader
from chuk_mcp_css.tools import (
    register_token_tools,
    register_transition_tools,
    register_typography_tools,
)

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-css")

# Paths - project token sets default to ./tokens
BASE_PATH = Path.cwd()
TOKENS_DIR = Path(os.environ.get(TOKENS_DIR_ENV, BASE_PATH / "tokens"))
TOKENS_LIBRARY_PATH = Path(__file__).parent / "tokens" / "library"

# Create loader
token_loader = TokenLoader(
    library_path=TOKENS_LIBRARY_PATH,
    project_path=TOKENS_DIR,
)

# Register all tools
transition_tools = register_transition_tools(mcp, token_loader)
typography_tools = register_typography_tools(mcp, token_loader)
token_tools = register_token_tools(mcp, token_loader)

# Export tool functions for direct access
css_transition = transition_tools["css_transition"]
css_duration = transition_tools["css_duration"]
css_easing = transition_tools["css_easing"]

css_rpx = typography_tools["css_rpx"]
css_font_size_rule = typography_tools["css_font_size_rule"]

css_list_token_sets = token_tools["css_list_token_sets"]
css_describe_token_set = token_tools["css_describe_token_set"]
css_copy_token_set_to_project = token_tools["css_copy_token_set_to_project"]

logger.info("CHUK CSS MCP Server initialized")
logger.info(f"  Library path: {TOKENS_LIBRARY_PATH}")
logger.info(f"  Project tokens dir: {TOKENS_DIR}")
