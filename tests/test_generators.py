"""
Tests for the code generators.

Tests cover:
- Naming and value formatting
- CSS variable sheets
- Tailwind theme files, app.css and the utility rule tables
- Index and per-mode token modules
"""

import pytest

from chuk_mcp_design_tokens.generators import (
    generate_all,
    generate_app_css,
    generate_css_variable_artifacts,
    generate_css_variables,
    generate_declaration_artifacts,
    generate_index,
    generate_tailwind_artifacts,
    generate_theme_css,
    map_utilities,
)
from chuk_mcp_design_tokens.generators.declarations import (
    binding_name,
    generate_index_declarations,
    generate_token_declarations,
    generate_token_module,
)
from chuk_mcp_design_tokens.generators.formatting import (
    camel_case,
    camelize,
    format_css_value,
    kebab_case,
)
from chuk_mcp_design_tokens.generators.tailwind import COLOR_RULES, SPACING_RULES
from chuk_mcp_design_tokens.models import Mode, Token, TokenTable
from chuk_mcp_design_tokens.pipeline import assemble, build_table


@pytest.fixture
def table(figma_document: list) -> TokenTable:
    """Token table built from the collection-based fixture."""
    return build_table(assemble(figma_document, "figma"))


def _table(light: dict, dark: dict | None = None, name: str = "amsterdam") -> TokenTable:
    return TokenTable.from_document({name: {"light": light, "dark": dark or {}}})


class TestFormatting:
    """Tests for naming and value helpers."""

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("textPrimary", "text-primary"),
            ("spacing_sm", "spacing-sm"),
            ("font size", "font-size"),
            ("already-kebab", "already-kebab"),
            ("HTMLColor", "htmlcolor"),
        ],
    )
    def test_kebab_case(self, name: str, expected: str) -> None:
        """Lowercase/uppercase boundaries and separators become hyphens."""
        assert kebab_case(name) == expected

    def test_camelize(self) -> None:
        """Hyphen-letter pairs become an uppercase letter."""
        assert camelize("design-system") == "designSystem"
        assert camelize("amsterdam") == "amsterdam"

    def test_camel_case(self) -> None:
        """Token names become valid identifiers."""
        assert camel_case("background-primary") == "backgroundPrimary"
        assert camel_case("font_weight_bold") == "fontWeightBold"
        assert camel_case("500") == "_500"

    def test_format_css_value(self) -> None:
        """Numeric dimensions get px; other values are literal."""
        assert format_css_value(Token(name="a", type="dimension", value=4)) == "4px"
        assert format_css_value(Token(name="a", type="dimension", value=4.0)) == "4px"
        assert format_css_value(Token(name="a", type="dimension", value=1.5)) == "1.5px"
        assert format_css_value(Token(name="a", type="dimension", value="2rem")) == "2rem"
        assert format_css_value(Token(name="a", type="fontWeight", value=700)) == "700"
        assert format_css_value(Token(name="a", type="string", value=True)) == "true"


class TestCssVariables:
    """Tests for the CSS variable generator."""

    def test_spacing_dimension_gets_px(self) -> None:
        """A numeric dimension token is emitted with px."""
        mode = Mode.from_document("light", {"spacing-sm": {"$type": "dimension", "$value": 4}})
        assert "  --spacing-sm: 4px;\n" in generate_css_variables(mode)

    def test_block_in_token_order(self, table: TokenTable) -> None:
        """One declaration per token, in insertion order."""
        css = generate_css_variables(table.themes["theme-amsterdam"].light)
        assert css == (
            ":root {\n"
            "  --primary: #000;\n"
            "  --background-primary: #fff;\n"
            "  --text-primary: {primary};\n"
            "  --spacing-sm: 4px;\n"
            "  --border-radius: 8px;\n"
            "  --font-family-base: Inter;\n"
            "}\n"
        )

    def test_custom_selector(self) -> None:
        """The selector is configurable."""
        mode = Mode.from_document("dark", {"primary": {"$type": "color", "$value": "#fff"}})
        assert generate_css_variables(mode, ".dark").startswith(".dark {\n")

    def test_one_sheet_per_theme_mode(self, table: TokenTable) -> None:
        """Artifacts are laid out by theme and mode."""
        paths = [a.path for a in generate_css_variable_artifacts(table)]
        assert paths == [
            "theme-amsterdam/light/css/tokens.css",
            "theme-amsterdam/dark/css/tokens.css",
            "design-system/light/css/tokens.css",
            "design-system/dark/css/tokens.css",
        ]


class TestTailwind:
    """Tests for the Tailwind bundle generator."""

    def test_primary_mapping_and_theme_block(self) -> None:
        """A primary color maps to --color-primary and the theme block holds it."""
        table = _table({"primary": {"$type": "color", "$value": "#000"}}, {})

        app_css = generate_app_css(table)
        assert "--color-primary: var(--primary);" in app_css

        theme_css = generate_theme_css(table.themes["amsterdam"])
        assert ".theme-amsterdam {\n   --primary: #000;\n}" in theme_css

    def test_theme_file(self, table: TokenTable) -> None:
        """Theme files use the clean name and carry light and dark blocks."""
        css = generate_theme_css(table.themes["theme-amsterdam"])
        assert css.startswith(
            "/**\n * Tailwind CSS v4 Theme: amsterdam\n * Auto-generated from design tokens\n */\n"
        )
        assert ".theme-amsterdam {\n   --primary: #000;\n" in css
        assert ".theme-amsterdam.dark {\n   --primary: #fff;\n" in css
        assert "   --spacing-sm: 4px;" in css

    def test_app_css(self, table: TokenTable) -> None:
        """app.css imports every theme and maps the first theme's light tokens."""
        css = generate_app_css(table)
        assert css == (
            '@import "tailwindcss";\n'
            "\n"
            "/* Import all theme definitions */\n"
            '@import "./theme-amsterdam.css";\n'
            '@import "./design-system.css";\n'
            "\n"
            "@custom-variant dark (&:is(.dark *));\n"
            "\n"
            "/* Disable all default Tailwind utilities */\n"
            "@theme {\n"
            "  --color-*: initial;\n"
            "}\n"
            "\n"
            "/* Map theme tokens to Tailwind-prefixed CSS variables for custom utilities */\n"
            "@theme inline {\n"
            "    --color-primary: var(--primary);\n"
            "    --color-background-primary: var(--background-primary);\n"
            "    --color-bg-primary: var(--background-primary);\n"
            "    --color-text-primary: var(--text-primary);\n"
            "    --spacing-sm: var(--spacing-sm);\n"
            "    --radius-default: var(--border-radius);\n"
            "}\n"
        )

    def test_color_rules_require_color_type(self) -> None:
        """Non-color tokens never produce color mappings."""
        mode = Mode.from_document("light", {"primary-size": {"$type": "string", "$value": "x"}})
        assert map_utilities(mode, (COLOR_RULES,)) == {}

    def test_spacing_rules_accept_named_spacing(self) -> None:
        """Tokens named spacing map even when not typed dimension."""
        mode = Mode.from_document("light", {"spacing-lg": {"$type": "string", "$value": "2rem"}})
        assert map_utilities(mode, (SPACING_RULES,)) == {"--spacing-lg": "--spacing-lg"}

    def test_last_radius_wins(self) -> None:
        """Every radius token collapses to one declaration."""
        mode = Mode.from_document(
            "light",
            {
                "radius-sm": {"$type": "dimension", "$value": 2},
                "border-radius-lg": {"$type": "dimension", "$value": 8},
            },
        )
        assert map_utilities(mode) == {"--radius-default": "--border-radius-lg"}

    def test_color_mappings_precede_spacing(self) -> None:
        """All color mappings come before all spacing mappings."""
        mode = Mode.from_document(
            "light",
            {
                "spacing-sm": {"$type": "dimension", "$value": 4},
                "success": {"$type": "color", "$value": "#0f0"},
            },
        )
        assert list(map_utilities(mode)) == ["--color-success", "--spacing-sm"]

    def test_artifacts(self, table: TokenTable) -> None:
        """One file per theme (raw name) followed by app.css."""
        paths = [a.path for a in generate_tailwind_artifacts(table)]
        assert paths == [
            "tailwind/theme-amsterdam.css",
            "tailwind/design-system.css",
            "tailwind/app.css",
        ]


class TestDeclarations:
    """Tests for the declaration generator."""

    def test_binding_names(self) -> None:
        """Hyphenated theme names are camel-cased."""
        assert binding_name("design-system", "light") == "designSystemLight"
        assert binding_name("design-system", "dark") == "designSystemDark"

    def test_index(self) -> None:
        """index.js imports and exports every theme's modes."""
        assert generate_index(["design-system"]) == (
            "/**\n"
            " * Auto-generated theme exports\n"
            " * This file provides easy access to all theme tokens\n"
            " */\n"
            "\n"
            "import * as designSystemLight from './design-system/light/ts/tokens.js';\n"
            "import * as designSystemDark from './design-system/dark/ts/tokens.js';\n"
            "\n"
            "export const themes = {\n"
            "  'design-system': {\n"
            "    light: designSystemLight,\n"
            "    dark: designSystemDark,\n"
            "  }\n"
            "};\n"
            "\n"
            "export default themes;\n"
            "\n"
        )

    def test_index_multiple_themes(self) -> None:
        """Theme entries are comma-separated."""
        index = generate_index(["a", "b"])
        assert "  },\n  'b': {" in index

    def test_index_declarations(self) -> None:
        """index.d.ts types each theme entry."""
        dts = generate_index_declarations(["design-system"])
        assert "export declare const themes: {" in dts
        assert "    light: typeof designSystemLight;" in dts

    def test_token_module(self) -> None:
        """Token modules export one constant per token."""
        mode = Mode.from_document(
            "light",
            {
                "background-primary": {"$type": "color", "$value": "#fff"},
                "spacing-sm": {"$type": "dimension", "$value": 4},
                "font-weight": {"$type": "fontWeight", "$value": 700},
            },
        )
        module = generate_token_module(mode)
        assert 'export const backgroundPrimary = "#fff";\n' in module
        assert 'export const spacingSm = "4px";\n' in module
        assert "export const fontWeight = 700;\n" in module

        declarations = generate_token_declarations(mode)
        assert "export const spacingSm: string;\n" in declarations
        assert "export const fontWeight: number;\n" in declarations

    def test_artifacts(self, table: TokenTable) -> None:
        """Per-mode modules come first, then the index files."""
        paths = [a.path for a in generate_declaration_artifacts(table)]
        assert paths[:2] == [
            "theme-amsterdam/light/ts/tokens.js",
            "theme-amsterdam/light/ts/tokens.d.ts",
        ]
        assert paths[-2:] == ["index.js", "index.d.ts"]
        assert len(paths) == 10


def test_generate_all(table: TokenTable) -> None:
    """Every generator contributes artifacts."""
    artifacts = generate_all(table)
    paths = {a.path for a in artifacts}
    assert "tailwind/app.css" in paths
    assert "index.js" in paths
    assert "design-system/dark/css/tokens.css" in paths
    assert all(a.content for a in artifacts)
