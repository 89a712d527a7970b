"""
Build configuration.

Values come from CLI flags or tool arguments first, then from environment
variables:

- BRAND: brand whose '<brand>-tokens.json' is built
- TOKENS_BRANDS_DIR: directory holding brand sources (default: brands)
- TOKENS_OUTPUT_DIR: output root (default: output)
- TOKENS_FORMAT: figma or tokens-studio (default: figma)
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_design_tokens.constants import (
    BRAND_FILE_SUFFIX,
    REQUIRED_MODES,
    ErrorMessages,
    InputFormat,
)
from chuk_mcp_design_tokens.generators.css_variables import DEFAULT_SELECTOR
from chuk_mcp_design_tokens.storage.loader import TokenDocumentLoader

ENV_BRAND = "BRAND"
ENV_BRANDS_DIR = "TOKENS_BRANDS_DIR"
ENV_OUTPUT_DIR = "TOKENS_OUTPUT_DIR"
ENV_FORMAT = "TOKENS_FORMAT"


class BuildConfig(BaseModel):
    """Configuration for one pipeline run."""

    brand: str | None = Field(None, description="Brand name")
    source: Path | None = Field(None, description="Explicit source file (overrides brand)")
    brands_dir: Path = Field(Path("brands"), description="Directory of brand sources")
    output_dir: Path = Field(Path("output"), description="Output root")
    input_format: InputFormat = Field(InputFormat.FIGMA, description="Source schema")
    theme: str | None = Field(None, description="Theme name for nested sources")
    modes: tuple[str, ...] = Field(REQUIRED_MODES, description="Modes for nested sources")
    css_selector: str = Field(DEFAULT_SELECTOR, description="Selector of per-mode CSS sheets")

    model_config = {"frozen": True}

    @classmethod
    def from_env(cls, **overrides: Any) -> BuildConfig:
        """
        Build a config from environment variables.

        Overrides that are None are ignored, so CLI flags left unset fall
        back to the environment.
        """
        values: dict[str, Any] = {}
        env_map = {
            "brand": ENV_BRAND,
            "brands_dir": ENV_BRANDS_DIR,
            "output_dir": ENV_OUTPUT_DIR,
            "input_format": ENV_FORMAT,
        }
        for field_name, env_name in env_map.items():
            env_value = os.environ.get(env_name)
            if env_value:
                values[field_name] = env_value

        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def source_path(self) -> Path:
        """
        Resolve the source document path.

        An explicit source wins. Otherwise '<brands_dir>/<brand>-tokens' with
        the first existing extension (.json, .yaml, .yml), defaulting to .json.

        Raises:
            ValueError: If neither source nor brand is set
        """
        if self.source is not None:
            return self.source
        if not self.brand:
            raise ValueError(ErrorMessages.BRAND_REQUIRED)

        return TokenDocumentLoader(self.brands_dir).brand_path(self.brand)

    def theme_name(self) -> str | None:
        """Theme for nested sources: explicit theme, then brand, then source stem."""
        if self.theme or self.brand:
            return self.theme or self.brand
        if self.source is not None:
            return self.source.stem.removesuffix(BRAND_FILE_SUFFIX)
        return None
