#!/usr/bin/env python3
"""
Entry point for the CHUK Design Tokens MCP Server.

This module provides the main entry point for the MCP server,
supporting multiple transport modes (stdio, http).
"""

import argparse
import asyncio
import logging
import os

from chuk_mcp_design_tokens.config import ENV_BRANDS_DIR, ENV_OUTPUT_DIR

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point with transport detection."""
    parser = argparse.ArgumentParser(description="CHUK Design Tokens MCP Server")
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
        "--brands-dir",
        help="Directory of brand sources (default: $TOKENS_BRANDS_DIR or ./brands)",
    )
    parser.add_argument(
        "--output",
        help="Output root for generated files (default: $TOKENS_OUTPUT_DIR or ./output)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # The server reads its paths from the environment at import time
    if args.brands_dir:
        os.environ[ENV_BRANDS_DIR] = args.brands_dir
    if args.output:
        os.environ[ENV_OUTPUT_DIR] = args.output

    from chuk_mcp_design_tokens.async_server import mcp

    if args.transport == "stdio":
        logger.info("Starting CHUK Design Tokens MCP Server (stdio)")
        asyncio.run(mcp.run_stdio())
    else:
        logger.info(f"Starting CHUK Design Tokens MCP Server (http:{args.port})")
        asyncio.run(mcp.run_http(port=args.port))


if __name__ == "__main__":
    main()
