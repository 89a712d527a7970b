"""
Pydantic models for the design token system.

This module provides:
- Token: A named, typed design value
- Mode: One variant (light/dark) of a theme's tokens
- Theme: A named set of modes
- TokenTable: The canonical theme -> mode -> token table
"""

from chuk_mcp_design_tokens.models.token import (
    REFERENCE_PATTERN,
    Mode,
    Theme,
    Token,
    TokenTable,
    TokenValue,
    strip_theme_prefix,
)

__all__ = [
    "REFERENCE_PATTERN",
    "Mode",
    "Theme",
    "Token",
    "TokenTable",
    "TokenValue",
    "strip_theme_prefix",
]
