"""
MCP tool implementations.

Tools are organized by domain:
- transition - Duration/easing resolution and transition values
- typography - Responsive font sizes
- tokens - Token set discovery and customization
"""

from chuk_mcp_css.tools.tokens import register_token_tools
from chuk_mcp_css.tools.transition import register_transition_tools
from chuk_mcp_css.tools.typography import register_typography_tools

__all__ = [
    "register_token_tools",
    "register_transition_tools",
    "register_typography_tools",
]
