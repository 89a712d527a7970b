"""
Naming and value formatting shared by the generators.
"""

from __future__ import annotations

import json
import re

from chuk_mcp_design_tokens.models.token import Token, TokenValue

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_SEPARATORS = re.compile(r"[\s_]+")
_HYPHEN_LETTER = re.compile(r"-([a-z])")
_WORD = re.compile(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])")


def kebab_case(name: str) -> str:
    """
    Convert camelCase or snake_case to kebab-case.

    textPrimary -> text-primary, spacing_sm -> spacing-sm
    """
    name = _CAMEL_BOUNDARY.sub(r"\1-\2", name)
    name = _SEPARATORS.sub("-", name)
    return name.lower()


def camelize(name: str) -> str:
    """
    Convert a hyphenated theme name to an identifier.

    design-system -> designSystem
    """
    return _HYPHEN_LETTER.sub(lambda m: m.group(1).upper(), name)


def camel_case(name: str) -> str:
    """
    Convert any token name to lowerCamelCase.

    background-primary -> backgroundPrimary, font_weight_bold -> fontWeightBold
    """
    words = [w.lower() for w in _WORD.findall(name)]
    if not words:
        return name
    identifier = words[0] + "".join(w[:1].upper() + w[1:] for w in words[1:])
    # Identifiers cannot start with a digit (500 -> _500)
    return f"_{identifier}" if identifier[0].isdigit() else identifier


def format_scalar(value: TokenValue) -> str:
    """Render a scalar the way it appears in a stylesheet."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_css_value(token: Token) -> str:
    """
    Render a token value for a CSS declaration.

    Numeric dimension values get a px unit; everything else is literal.
    """
    if token.is_numeric_dimension:
        return f"{format_scalar(token.value)}px"
    return format_scalar(token.value)


def format_js_value(token: Token) -> str:
    """Render a token value as a JavaScript literal."""
    if token.is_numeric_dimension:
        return json.dumps(f"{format_scalar(token.value)}px")
    if isinstance(token.value, float) and token.value.is_integer():
        return str(int(token.value))
    return json.dumps(token.value)


def js_type(token: Token) -> str:
    """TypeScript type of a rendered token value."""
    if token.is_numeric_dimension or isinstance(token.value, str):
        return "string"
    if isinstance(token.value, bool):
        return "boolean"
    return "number"
