"""
Tests for build configuration.
"""

from pathlib import Path

import pytest

from chuk_mcp_design_tokens.config import BuildConfig
from chuk_mcp_design_tokens.constants import InputFormat


class TestBuildConfig:
    """Tests for BuildConfig."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Defaults apply when nothing is set."""
        for name in ("BRAND", "TOKENS_BRANDS_DIR", "TOKENS_OUTPUT_DIR", "TOKENS_FORMAT"):
            monkeypatch.delenv(name, raising=False)
        config = BuildConfig.from_env()
        assert config.brand is None
        assert config.brands_dir == Path("brands")
        assert config.output_dir == Path("output")
        assert config.input_format is InputFormat.FIGMA
        assert config.modes == ("light", "dark")

    def test_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Environment variables fill unset values."""
        monkeypatch.setenv("BRAND", "acme")
        monkeypatch.setenv("TOKENS_FORMAT", "tokens-studio")
        monkeypatch.setenv("TOKENS_OUTPUT_DIR", "dist")
        config = BuildConfig.from_env()
        assert config.brand == "acme"
        assert config.input_format is InputFormat.TOKENS_STUDIO
        assert config.output_dir == Path("dist")

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Explicit values beat the environment; None overrides are ignored."""
        monkeypatch.setenv("BRAND", "acme")
        config = BuildConfig.from_env(brand="other", theme=None)
        assert config.brand == "other"
        assert config.theme is None

    def test_source_path_from_brand(self, brands_dir: Path) -> None:
        """The brand resolves to its source file."""
        config = BuildConfig(brand="acme", brands_dir=brands_dir)
        assert config.source_path() == brands_dir / "acme-tokens.json"

    def test_explicit_source_wins(self, temp_dir: Path) -> None:
        """An explicit source is used as-is."""
        config = BuildConfig(brand="acme", source=temp_dir / "x.json")
        assert config.source_path() == temp_dir / "x.json"

    def test_brand_required(self) -> None:
        """Without brand or source there is nothing to build."""
        with pytest.raises(ValueError, match="Brand name is required"):
            BuildConfig().source_path()

    def test_theme_name(self, temp_dir: Path) -> None:
        """Theme falls back to the brand, then the source stem."""
        assert BuildConfig(brand="acme").theme_name() == "acme"
        assert BuildConfig(brand="acme", theme="core").theme_name() == "core"
        assert BuildConfig(source=temp_dir / "studio-tokens.json").theme_name() == "studio"
        assert BuildConfig().theme_name() is None
