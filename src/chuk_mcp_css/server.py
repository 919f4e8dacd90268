#!/usr/bin/env python3
"""
Command line entry point for the CHUK CSS MCP Server.

Runs the server over stdio or http, or lists the token sets the server
would load and exits.
"""

import argparse
import asyncio
import logging
import os
from pathlib import Path

from chuk_mcp_css.constants import TOKENS_DIR_ENV
from chuk_mcp_css.tokens import TokenLoader

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the console script."""
    parser = argparse.ArgumentParser(
        prog="chuk-mcp-css",
        description="Serve CSS transition and responsive font-size helpers over MCP",
    )
    parser.add_argument(
        "--transport",
        choices=["stdio", "http"],
        default="stdio",
        help="Transport mode (default: stdio)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="HTTP port (only for http transport)",
    )
    parser.add_argument(
        "--tokens-dir",
        type=Path,
        default=None,
        help="Project token set directory (default: ./tokens)",
    )
    parser.add_argument(
        "--list-token-sets",
        action="store_true",
        help="Print the available token sets and exit",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def list_token_sets(tokens_dir: Path | None) -> list[str]:
    """Describe each token set as 'name: table sizes'."""
    loader = TokenLoader(project_path=tokens_dir or Path.cwd() / "tokens")
    lines = []
    for meta in loader.list_token_sets():
        sizes = ", ".join(f"{table}={count}" for table, count in meta.table_sizes.items())
        lines.append(f"{meta.name}: {sizes}")
    return lines


def main(argv: list[str] | None = None) -> None:
    """Parse arguments, then list token sets or run the server."""
    args = build_parser().parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.list_token_sets:
        for line in list_token_sets(args.tokens_dir):
            print(line)
        return

    if args.tokens_dir is not None:
        os.environ[TOKENS_DIR_ENV] = str(args.tokens_dir)

    # The server module reads its paths at import time
    from chuk_mcp_css.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK CSS MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK CSS MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
