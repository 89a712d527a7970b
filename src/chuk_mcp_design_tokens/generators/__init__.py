"""
Code generators - render a TokenTable into downstream artifacts.

The generators are independent pure functions over the same table:
    TokenTable → CSS variables (per theme per mode)
               → Tailwind bundle (per theme + app.css)
               → Declarations (per-mode modules + index)
"""

from chuk_mcp_design_tokens.generators.artifact import GeneratedArtifact
from chuk_mcp_design_tokens.generators.css_variables import (
    generate_css_variable_artifacts,
    generate_css_variables,
)
from chuk_mcp_design_tokens.generators.declarations import (
    generate_declaration_artifacts,
    generate_index,
)
from chuk_mcp_design_tokens.generators.tailwind import (
    UTILITY_RULE_GROUPS,
    generate_app_css,
    generate_tailwind_artifacts,
    generate_theme_css,
    map_utilities,
)
from chuk_mcp_design_tokens.models.token import TokenTable


def generate_all(table: TokenTable) -> list[GeneratedArtifact]:
    """Run every generator against a table."""
    return [
        *generate_css_variable_artifacts(table),
        *generate_tailwind_artifacts(table),
        *generate_declaration_artifacts(table),
    ]


__all__ = [
    "UTILITY_RULE_GROUPS",
    "GeneratedArtifact",
    "generate_all",
    "generate_app_css",
    "generate_css_variable_artifacts",
    "generate_css_variables",
    "generate_declaration_artifacts",
    "generate_index",
    "generate_tailwind_artifacts",
    "generate_theme_css",
    "map_utilities",
]
