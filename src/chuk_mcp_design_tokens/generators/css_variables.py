"""
CSS variable generator - one custom-property sheet per theme per mode.

Each token becomes '--<kebab-name>: <value>;' in token order.
"""

from __future__ import annotations

from chuk_mcp_design_tokens.generators.artifact import GeneratedArtifact
from chuk_mcp_design_tokens.generators.formatting import format_css_value, kebab_case
from chuk_mcp_design_tokens.models.token import Mode, Token, TokenTable

DEFAULT_SELECTOR = ":root"


def css_variable_name(name: str) -> str:
    """Custom property name for a token (primaryColor -> --primary-color)."""
    return f"--{kebab_case(name)}"


def css_declaration(token: Token) -> str:
    """A single custom-property declaration, without indentation."""
    return f"{css_variable_name(token.name)}: {format_css_value(token)};"


def generate_css_variables(mode: Mode, selector: str = DEFAULT_SELECTOR) -> str:
    """
    Generate the custom-property block for one mode.

    Args:
        mode: Mode to render
        selector: Rule selector (default ':root')

    Returns:
        CSS text
    """
    body = "".join(f"  {css_declaration(token)}\n" for token in mode.tokens.values())
    return f"{selector} {{\n{body}}}\n"


def css_variables_path(theme_name: str, mode_name: str) -> str:
    """Output path of a mode's sheet."""
    return f"{theme_name}/{mode_name}/css/tokens.css"


def generate_css_variable_artifacts(
    table: TokenTable, selector: str = DEFAULT_SELECTOR
) -> list[GeneratedArtifact]:
    """Generate one sheet per theme per mode, in table order."""
    return [
        GeneratedArtifact(
            path=css_variables_path(theme_name, mode_name),
            content=generate_css_variables(mode, selector),
        )
        for theme_name, theme in table.themes.items()
        for mode_name, mode in theme.modes.items()
    ]
