"""
MCP tool implementations.

- tokens - brand discovery, validation, flattening and building
"""

from chuk_mcp_design_tokens.tools.tokens import register_token_tools

__all__ = [
    "register_token_tools",
]
