"""
Tailwind CSS v4 bundle generator.

Produces:
- one stylesheet per theme with a '.theme-<name>' block (light values) and
  a '.theme-<name>.dark' block (dark overrides)
- an aggregate app.css that imports Tailwind and every theme file, declares
  the dark variant, resets the default color namespace, and maps a fixed
  subset of the first theme's light tokens to Tailwind utility variables

The utility mapping is a fixed taxonomy expressed as ordered rule tables.
Only the first theme's light mode feeds it.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from chuk_mcp_design_tokens.constants import (
    TAILWIND_APP_FILENAME,
    TAILWIND_DIR,
    TokenType,
)
from chuk_mcp_design_tokens.generators.artifact import GeneratedArtifact
from chuk_mcp_design_tokens.generators.css_variables import css_declaration
from chuk_mcp_design_tokens.generators.formatting import kebab_case
from chuk_mcp_design_tokens.models.token import Mode, Theme, Token, TokenTable

logger = logging.getLogger(__name__)

THEME_INDENT = "   "
UTILITY_INDENT = "    "


@dataclass(frozen=True)
class UtilityRule:
    """Maps tokens whose name contains any keyword to a utility variable."""

    keywords: tuple[str, ...]
    target: Callable[[str], str]  # kebab-case token name -> utility variable

    def matches(self, name: str) -> bool:
        """Substring match against the raw (not kebab-cased) token name."""
        return any(keyword in name for keyword in self.keywords)


@dataclass(frozen=True)
class UtilityRuleGroup:
    """An ordered set of rules applied to the tokens a group accepts."""

    name: str
    accepts: Callable[[Token], bool]
    rules: tuple[UtilityRule, ...]


def _strip_first(prefix: str) -> Callable[[str], str]:
    return lambda name: name.replace(prefix, "", 1)


COLOR_RULES = UtilityRuleGroup(
    name="color",
    accepts=lambda token: token.type == TokenType.COLOR.value,
    rules=(
        UtilityRule(
            ("primary", "secondary", "error", "warning", "info", "success"),
            lambda name: f"--color-{name}",
        ),
        UtilityRule(
            ("background",),
            lambda name: f"--color-bg-{_strip_first('background-')(name)}",
        ),
        UtilityRule(
            ("text",),
            lambda name: f"--color-text-{_strip_first('text-')(name)}",
        ),
    ),
)

SPACING_RULES = UtilityRuleGroup(
    name="spacing",
    accepts=lambda token: token.type == TokenType.DIMENSION.value or "spacing" in token.name,
    rules=(
        UtilityRule(
            ("spacing",),
            lambda name: f"--spacing-{_strip_first('spacing-')(name)}",
        ),
        # Every radius token maps onto the same variable; the last one wins
        UtilityRule(
            ("radius", "border-radius"),
            lambda name: "--radius-default",
        ),
    ),
)

UTILITY_RULE_GROUPS: tuple[UtilityRuleGroup, ...] = (COLOR_RULES, SPACING_RULES)


def map_utilities(
    mode: Mode,
    groups: tuple[UtilityRuleGroup, ...] = UTILITY_RULE_GROUPS,
) -> dict[str, str]:
    """
    Map a mode's tokens to Tailwind utility variables.

    Groups are applied in order, each over every token, so all color
    mappings precede all spacing mappings. A token may match several rules.

    Args:
        mode: Source mode (the first theme's light mode)
        groups: Rule groups to apply

    Returns:
        Ordered {utility variable: source variable} mapping
    """
    mappings: dict[str, str] = {}
    for group in groups:
        for name, token in mode.tokens.items():
            if not group.accepts(token):
                continue
            kebab = kebab_case(name)
            for rule in group.rules:
                if rule.matches(name):
                    mappings[rule.target(kebab)] = f"--{kebab}"
    return mappings


def theme_filename(theme_name: str) -> str:
    """File name of a theme stylesheet (uses the raw theme name)."""
    return f"{theme_name}.css"


def _mode_block(mode: Mode) -> str:
    return "\n".join(f"{THEME_INDENT}{css_declaration(token)}" for token in mode.tokens.values())


def generate_theme_css(theme: Theme) -> str:
    """
    Generate the stylesheet for one theme.

    Args:
        theme: Theme with light and dark modes

    Returns:
        CSS text with light and dark rule blocks
    """
    name = theme.clean_name
    return f"""/**
 * Tailwind CSS v4 Theme: {name}
 * Auto-generated from design tokens
 */

.theme-{name} {{
{_mode_block(theme.light)}
}}

.theme-{name}.dark {{
{_mode_block(theme.dark)}
}}
"""


def generate_app_css(table: TokenTable) -> str:
    """
    Generate the aggregate app.css.

    Args:
        table: Token table (first theme feeds the utility mapping)

    Returns:
        CSS text
    """
    imports = "\n".join(f'@import "./{theme_filename(name)}";' for name in table.theme_names())

    first = table.first_theme()
    mappings = map_utilities(first.light) if first is not None else {}
    utilities = "".join(
        f"\n{UTILITY_INDENT}{target}: var({source});" for target, source in mappings.items()
    )

    return f"""@import "tailwindcss";

/* Import all theme definitions */
{imports}

@custom-variant dark (&:is(.dark *));

/* Disable all default Tailwind utilities */
@theme {{
  --color-*: initial;
}}

/* Map theme tokens to Tailwind-prefixed CSS variables for custom utilities */
@theme inline {{{utilities}
}}
"""


def generate_tailwind_artifacts(table: TokenTable) -> list[GeneratedArtifact]:
    """Generate every theme stylesheet followed by app.css."""
    artifacts = [
        GeneratedArtifact(
            path=f"{TAILWIND_DIR}/{theme_filename(theme_name)}",
            content=generate_theme_css(theme),
        )
        for theme_name, theme in table.themes.items()
    ]
    artifacts.append(
        GeneratedArtifact(
            path=f"{TAILWIND_DIR}/{TAILWIND_APP_FILENAME}",
            content=generate_app_css(table),
        )
    )
    logger.debug(f"Generated {len(artifacts)} Tailwind file(s)")
    return artifacts
