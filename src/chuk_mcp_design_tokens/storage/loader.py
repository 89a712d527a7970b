"""
Token document loader - discovers and reads raw token exports.

Sources are '<brand>-tokens.json' (or .yaml/.yml) files in a brands
directory. JSON is parsed with the json module; YAML with PyYAML.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from chuk_mcp_design_tokens.constants import (
    BRAND_FILE_SUFFIX,
    SOURCE_EXTENSIONS,
    ErrorMessages,
)
from chuk_mcp_design_tokens.errors import InputNotFound, MalformedInput
from chuk_mcp_design_tokens.models.token import TokenTable

logger = logging.getLogger(__name__)


def load_document(path: Path) -> Any:
    """
    Read and parse a token document.

    Args:
        path: JSON or YAML file

    Returns:
        The parsed document

    Raises:
        InputNotFound: If the file does not exist
        MalformedInput: If the file cannot be read or parsed
    """
    if not path.is_file():
        raise InputNotFound(ErrorMessages.INPUT_NOT_FOUND.format(path=path), location=str(path))

    try:
        text = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise MalformedInput(
            ErrorMessages.INVALID_ENCODING.format(path=path, error=e), location=str(path)
        ) from e
    except OSError as e:
        raise MalformedInput(
            ErrorMessages.UNREADABLE_SOURCE.format(path=path, error=e), location=str(path)
        ) from e

    if path.suffix.lower() in (".yaml", ".yml"):
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise MalformedInput(
                ErrorMessages.INVALID_YAML.format(path=path, error=e), location=str(path)
            ) from e

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise MalformedInput(
            ErrorMessages.INVALID_JSON.format(path=path, error=e), location=str(path)
        ) from e


def load_table(path: Path) -> TokenTable:
    """
    Read a flattened token table written by ArtifactWriter.write_table().

    Raises:
        InputNotFound: If the file does not exist
        MalformedInput: If the file is not a flattened table
    """
    document = load_document(path)
    if not isinstance(document, dict):
        raise MalformedInput(f"Flattened token table must be an object: {path}", location=str(path))
    try:
        return TokenTable.from_document(document)
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        raise MalformedInput(f"Invalid flattened token table {path}: {e}", location=str(path)) from e


class TokenDocumentLoader:
    """
    Discovers and loads brand token sources.

    Brand sources live in a single directory as '<brand>-tokens.<ext>'.
    """

    def __init__(self, brands_dir: Path):
        """
        Initialize the loader.

        Args:
            brands_dir: Directory holding brand sources
        """
        self.brands_dir = brands_dir

    def list_brands(self) -> list[str]:
        """List brand names with a source file, sorted."""
        if not self.brands_dir.exists():
            return []

        brands: set[str] = set()
        for path in self.brands_dir.iterdir():
            if path.suffix.lower() in SOURCE_EXTENSIONS and path.stem.endswith(BRAND_FILE_SUFFIX):
                brands.add(path.stem.removesuffix(BRAND_FILE_SUFFIX))
        return sorted(brands)

    def brand_path(self, brand: str) -> Path:
        """Path of a brand source (first existing extension, else .json)."""
        stem = f"{brand}{BRAND_FILE_SUFFIX}"
        for extension in SOURCE_EXTENSIONS:
            candidate = self.brands_dir / f"{stem}{extension}"
            if candidate.exists():
                return candidate
        return self.brands_dir / f"{stem}{SOURCE_EXTENSIONS[0]}"

    def load_brand(self, brand: str) -> Any:
        """
        Load a brand's raw token document.

        Raises:
            InputNotFound: If the brand has no source
            MalformedInput: If the source cannot be parsed
        """
        path = self.brand_path(brand)
        logger.debug(f"Loading brand '{brand}' from {path}")
        return load_document(path)
