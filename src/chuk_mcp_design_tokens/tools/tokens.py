"""
Token tools - MCP tools for validating and building design tokens.

Tools for listing brand sources, validating them, and writing the
flattened table and generated artifacts.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_design_tokens.builder import TokenBuilder
from chuk_mcp_design_tokens.config import BuildConfig
from chuk_mcp_design_tokens.constants import ErrorMessages, InputFormat, SuccessMessages
from chuk_mcp_design_tokens.errors import DesignTokenError
from chuk_mcp_design_tokens.models import TokenTable
from chuk_mcp_design_tokens.storage import TokenDocumentLoader

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _error_response(error: DesignTokenError) -> str:
    return json.dumps({"status": "error", **error.to_dict()})


def register_token_tools(
    mcp: ChukMCPServer,
    loader: TokenDocumentLoader,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register design token tools with the MCP server.

    Args:
        mcp: The MCP server instance
        loader: Loader for brand sources
        output_dir: Output root for generated files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def make_config(
        brand: str | None,
        source: str | None,
        format: str,
        theme: str | None,
    ) -> BuildConfig:
        if not brand and not source:
            raise ValueError(ErrorMessages.BRAND_REQUIRED)
        if format not in {f.value for f in InputFormat}:
            choices = ", ".join(f.value for f in InputFormat)
            raise ValueError(ErrorMessages.UNKNOWN_FORMAT.format(format=format, choices=choices))
        return BuildConfig(
            brand=brand,
            source=Path(source) if source else None,
            brands_dir=loader.brands_dir,
            output_dir=output_dir,
            input_format=InputFormat(format),
            theme=theme,
        )

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_brands() -> str:
        """
        List brands with a token source.

        Looks for '<brand>-tokens.json' (or .yaml) files in the brands
        directory.

        Returns:
            JSON string with brand names

        Example:
            tokens_list_brands()
        """
        try:
            brands = loader.list_brands()
            return json.dumps({"status": "success", "brands": brands, "count": len(brands)})
        except Exception as e:
            logger.exception("Failed to list brands")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_brands"] = tokens_list_brands

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_validate(
        brand: str | None = None,
        source: str | None = None,
        format: str = InputFormat.FIGMA.value,
        theme: str | None = None,
    ) -> str:
        """
        Validate a token source.

        Checks that every theme has light and dark modes and that every
        token has a type and value. Unknown token types and references to
        missing tokens are reported as warnings.

        Args:
            brand: Brand name (reads <brand>-tokens.json)
            source: Explicit source file path (overrides brand)
            format: 'figma' (collection-based) or 'tokens-studio' (nested)
            theme: Theme name for nested sources (default: brand)

        Returns:
            JSON string with validation results

        Example:
            tokens_validate(brand="acme")
        """
        try:
            result = TokenBuilder(make_config(brand, source, format, theme)).validate()
            if result.error is not None:
                return _error_response(result.error)

            return json.dumps(
                {
                    "status": "success",
                    "valid": True,
                    "themes": result.theme_names,
                    "warnings": [w.to_dict() for w in result.warnings],
                    "message": SuccessMessages.TOKENS_VALID.format(themes=len(result.theme_names)),
                }
            )
        except Exception as e:
            logger.exception("Failed to validate tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_validate"] = tokens_validate

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_list_themes(
        brand: str | None = None,
        source: str | None = None,
        format: str = InputFormat.FIGMA.value,
        theme: str | None = None,
    ) -> str:
        """
        List the themes and modes of a token source.

        Args:
            brand: Brand name (reads <brand>-tokens.json)
            source: Explicit source file path (overrides brand)
            format: 'figma' (collection-based) or 'tokens-studio' (nested)
            theme: Theme name for nested sources (default: brand)

        Returns:
            JSON string with themes, their modes and token counts

        Example:
            tokens_list_themes(brand="acme")
        """
        try:
            result = TokenBuilder(make_config(brand, source, format, theme)).validate()
            if result.error is not None:
                return _error_response(result.error)
            table = result.table or TokenTable()

            return json.dumps(
                {
                    "status": "success",
                    "themes": [
                        {
                            "name": t.name,
                            "modes": {m.name: len(m) for m in t.modes.values()},
                        }
                        for t in table.themes.values()
                    ],
                    "count": len(table),
                }
            )
        except Exception as e:
            logger.exception("Failed to list themes")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_list_themes"] = tokens_list_themes

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_flatten(
        brand: str | None = None,
        source: str | None = None,
        format: str = InputFormat.FIGMA.value,
        theme: str | None = None,
    ) -> str:
        """
        Flatten a token source into the canonical table.

        Writes tokens-flattened.json ({theme: {mode: {token: record}}}) to
        the output directory.

        Args:
            brand: Brand name (reads <brand>-tokens.json)
            source: Explicit source file path (overrides brand)
            format: 'figma' (collection-based) or 'tokens-studio' (nested)
            theme: Theme name for nested sources (default: brand)

        Returns:
            JSON string with the written path and theme names

        Example:
            tokens_flatten(brand="acme")
        """
        try:
            result = TokenBuilder(make_config(brand, source, format, theme)).flatten()
            if result.error is not None:
                return _error_response(result.error)

            path = str(result.written[0])
            return json.dumps(
                {
                    "status": "success",
                    "path": path,
                    "themes": result.theme_names,
                    "message": SuccessMessages.TOKENS_FLATTENED.format(format=format, path=path),
                }
            )
        except Exception as e:
            logger.exception("Failed to flatten tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_flatten"] = tokens_flatten

    @mcp.tool  # type: ignore[arg-type]
    async def tokens_build(
        brand: str | None = None,
        source: str | None = None,
        format: str = InputFormat.FIGMA.value,
        theme: str | None = None,
    ) -> str:
        """
        Build every artifact for a token source.

        Generates per-mode CSS variables, the Tailwind theme bundle
        (one file per theme plus app.css), per-mode token modules and the
        index declarations. Nothing is written if validation fails.

        Args:
            brand: Brand name (reads <brand>-tokens.json)
            source: Explicit source file path (overrides brand)
            format: 'figma' (collection-based) or 'tokens-studio' (nested)
            theme: Theme name for nested sources (default: brand)

        Returns:
            JSON string with written files and warnings

        Example:
            tokens_build(brand="acme")
        """
        try:
            result = TokenBuilder(make_config(brand, source, format, theme)).build()
            if result.error is not None:
                return _error_response(result.error)

            return json.dumps(
                {
                    "status": "success",
                    "output_dir": str(output_dir),
                    "themes": result.theme_names,
                    "files": [a.path for a in result.artifacts],
                    "warnings": [w.to_dict() for w in result.warnings],
                    "message": SuccessMessages.TOKENS_BUILT.format(
                        artifacts=len(result.written),
                        themes=len(result.theme_names),
                        path=output_dir,
                    ),
                }
            )
        except Exception as e:
            logger.exception("Failed to build tokens")
            return json.dumps({"status": "error", "message": str(e)})

    tools["tokens_build"] = tokens_build

    return tools
