#!/usr/bin/env python3
"""
Async Design Tokens MCP Server using chuk-mcp-server

This server provides MCP tools for turning design-token exports into
front-end artifacts. A brand's export (Figma variables or Tokens Studio)
is normalized into a theme → mode → token table, validated, and turned
into CSS custom properties, a Tailwind theme bundle and JS/TS modules.

The server provides tools for:
- Discovering brand sources
- Validating token structure
- Writing the flattened token table
- Building every generated artifact
"""

import logging

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_design_tokens.config import BuildConfig
from chuk_mcp_design_tokens.storage import TokenDocumentLoader
from chuk_mcp_design_tokens.tools import register_token_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-design-tokens")

# Paths - TOKENS_BRANDS_DIR / TOKENS_OUTPUT_DIR, relative to the working directory
config = BuildConfig.from_env()
BRANDS_DIR = config.brands_dir
OUTPUT_DIR = config.output_dir

loader = TokenDocumentLoader(BRANDS_DIR)

# Register all tools
token_tools = register_token_tools(mcp, loader, OUTPUT_DIR)

# Export tool functions for direct access
tokens_list_brands = token_tools["tokens_list_brands"]
tokens_list_themes = token_tools["tokens_list_themes"]
tokens_validate = token_tools["tokens_validate"]
tokens_flatten = token_tools["tokens_flatten"]
tokens_build = token_tools["tokens_build"]

logger.info("CHUK Design Tokens MCP Server initialized")
logger.info(f"  Brands dir: {BRANDS_DIR}")
logger.info(f"  Output dir: {OUTPUT_DIR}")
