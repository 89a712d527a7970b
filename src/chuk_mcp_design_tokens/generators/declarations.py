"""
Declaration generator - importable index of all themes and modes.

The index binds a light and dark namespace import per theme to that
theme's per-mode token module and exports them as 'themes' (also the
default export). Theme names become identifiers by camel-casing their
hyphenated segments (design-system -> designSystem).
"""

from __future__ import annotations

from chuk_mcp_design_tokens.constants import INDEX_DTS_FILENAME, INDEX_JS_FILENAME, ModeName
from chuk_mcp_design_tokens.generators.artifact import GeneratedArtifact
from chuk_mcp_design_tokens.generators.formatting import (
    camel_case,
    camelize,
    format_js_value,
    js_type,
)
from chuk_mcp_design_tokens.models.token import Mode, TokenTable

MODULE_HEADER = """/**
 * Do not edit directly, this file was auto-generated.
 */
"""


def binding_name(theme_name: str, mode_name: str) -> str:
    """Import binding for a theme mode (design-system, light -> designSystemLight)."""
    return f"{camelize(theme_name)}{mode_name.capitalize()}"


def module_path(theme_name: str, mode_name: str) -> str:
    """Path of a mode's token module, relative to the output root."""
    return f"{theme_name}/{mode_name}/ts/tokens.js"


def _imports(theme_names: list[str]) -> str:
    return "\n".join(
        f"import * as {binding_name(name, mode)} from './{module_path(name, mode)}';"
        for name in theme_names
        for mode in (ModeName.LIGHT.value, ModeName.DARK.value)
    )


def generate_index(theme_names: list[str]) -> str:
    """
    Generate index.js for a list of theme names.

    Args:
        theme_names: Theme names in table order

    Returns:
        JavaScript module text
    """
    entries = ",\n".join(
        f"""  '{name}': {{
    light: {binding_name(name, ModeName.LIGHT.value)},
    dark: {binding_name(name, ModeName.DARK.value)},
  }}"""
        for name in theme_names
    )

    return f"""/**
 * Auto-generated theme exports
 * This file provides easy access to all theme tokens
 */

{_imports(theme_names)}

export const themes = {{
{entries}
}};

export default themes;

"""


def generate_index_declarations(theme_names: list[str]) -> str:
    """Generate index.d.ts describing the shape of 'themes'."""
    entries = "\n".join(
        f"""  '{name}': {{
    light: typeof {binding_name(name, ModeName.LIGHT.value)};
    dark: typeof {binding_name(name, ModeName.DARK.value)};
  }};"""
        for name in theme_names
    )

    return f"""/**
 * Auto-generated theme declarations
 */

{_imports(theme_names)}

export declare const themes: {{
{entries}
}};

export default themes;
"""


def _exports(mode: Mode) -> dict[str, tuple[str, str]]:
    # Names that camel-case to the same identifier collapse; the last one wins
    exports: dict[str, tuple[str, str]] = {}
    for name, token in mode.tokens.items():
        exports[camel_case(name)] = (format_js_value(token), js_type(token))
    return exports


def generate_token_module(mode: Mode) -> str:
    """Generate a mode's tokens.js (one named export per token)."""
    lines = "".join(
        f"export const {identifier} = {value};\n"
        for identifier, (value, _) in _exports(mode).items()
    )
    return f"{MODULE_HEADER}\n{lines}"


def generate_token_declarations(mode: Mode) -> str:
    """Generate a mode's tokens.d.ts."""
    lines = "".join(
        f"export const {identifier}: {ts_type};\n"
        for identifier, (_, ts_type) in _exports(mode).items()
    )
    return f"{MODULE_HEADER}\n{lines}"


def generate_declaration_artifacts(table: TokenTable) -> list[GeneratedArtifact]:
    """Generate per-mode token modules followed by the index files."""
    artifacts: list[GeneratedArtifact] = []

    for theme_name, theme in table.themes.items():
        for mode_name, mode in theme.modes.items():
            js_path = module_path(theme_name, mode_name)
            artifacts.append(GeneratedArtifact(path=js_path, content=generate_token_module(mode)))
            artifacts.append(
                GeneratedArtifact(
                    path=js_path.removesuffix(".js") + ".d.ts",
                    content=generate_token_declarations(mode),
                )
            )

    theme_names = table.theme_names()
    artifacts.append(GeneratedArtifact(path=INDEX_JS_FILENAME, content=generate_index(theme_names)))
    artifacts.append(
        GeneratedArtifact(path=INDEX_DTS_FILENAME, content=generate_index_declarations(theme_names))
    )
    return artifacts
