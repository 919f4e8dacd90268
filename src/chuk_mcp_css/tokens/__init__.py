"""
Token sets - the duration, easing and width tables as YAML files.

The packaged library holds the defaults; a project directory can
shadow a library set or add new ones.
"""

from chuk_mcp_css.tokens.loader import TokenLoader

__all__ = ["TokenLoader"]
