"""
Pytest configuration and shared fixtures.
"""

import json
import tempfile
from pathlib import Path
from typing import Any

import pytest


@pytest.fixture
def temp_dir() -> Path:
    """Create a temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


def _mode(primary: str, background: str) -> dict[str, Any]:
    return {
        "primary": {"$type": "color", "$value": primary},
        "background-primary": {"$type": "color", "$value": background},
        "textPrimary": {"$type": "color", "$value": "{primary}"},
        "spacing-sm": {"$type": "float", "$value": 4},
        "border-radius": {"$type": "dimension", "$value": 8},
        "fontFamilyBase": {"$type": "string", "$value": "Inter"},
    }


@pytest.fixture
def figma_document() -> list[dict[str, Any]]:
    """A collection-based export with two themes."""
    return [
        {
            "theme-amsterdam": {
                "modes": {
                    "light": _mode("#000", "#fff"),
                    "dark": _mode("#fff", "#000"),
                }
            }
        },
        {
            "design-system": {
                "modes": {
                    "light": _mode("#0055ff", "#fafafa"),
                    "dark": _mode("#3377ff", "#111111"),
                }
            }
        },
    ]


@pytest.fixture
def nested_document() -> dict[str, Any]:
    """A nested path-based export."""
    return {
        "$metadata": {"tokenSetOrder": ["core"]},
        "$themes": [],
        "color": {
            "blue": {"500": {"value": "#0055ff", "type": "color"}},
            "primary": {"value": "{color.blue.500}", "type": "color"},
        },
        "spacing": {
            "spacing-sm": {"value": 4, "type": "float"},
        },
    }


@pytest.fixture
def brands_dir(temp_dir: Path, figma_document: list, nested_document: dict) -> Path:
    """A brands directory with a collection-based and a nested source."""
    path = temp_dir / "brands"
    path.mkdir()
    (path / "acme-tokens.json").write_text(json.dumps(figma_document))
    (path / "studio-tokens.json").write_text(json.dumps(nested_document))
    return path


@pytest.fixture
def output_dir(temp_dir: Path) -> Path:
    """Output root for generated files."""
    return temp_dir / "output"
