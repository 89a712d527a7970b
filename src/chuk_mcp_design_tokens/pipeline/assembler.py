"""
Theme/mode assembler - groups normalized tokens into theme records.

Collection-based exports already carry theme/mode nesting and pass through.
Nested exports carry no theme or mode structure, so the whole flattened map
is placed under a theme and modes supplied by the caller. The two import
paths are independent; they are not unified into one theme model.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from chuk_mcp_design_tokens.constants import (
    MODES_KEY,
    REQUIRED_MODES,
    VALUE_KEY,
    ErrorMessages,
    InputFormat,
)
from chuk_mcp_design_tokens.errors import SchemaViolation
from chuk_mcp_design_tokens.models.token import TokenTable
from chuk_mcp_design_tokens.pipeline.normalizer import (
    TokenRecords,
    flatten_nested,
    normalize_collections,
    parse_format,
)
from chuk_mcp_design_tokens.pipeline.references import rewrite_references

logger = logging.getLogger(__name__)

# [{theme: {"modes": {mode: {name: record}}}}]
ThemeRecords = list[dict[str, Any]]


def assemble_collections(records: Sequence[Mapping[str, Any]]) -> ThemeRecords:
    """
    Assemble normalized collection records.

    Args:
        records: Output of normalize_collections()

    Returns:
        Theme records in document order
    """
    return [dict(record) for record in records]


def assemble_nested(
    tokens: TokenRecords,
    theme_name: str,
    mode_names: Sequence[str] = REQUIRED_MODES,
) -> ThemeRecords:
    """
    Place a flattened token map under a single theme.

    Every listed mode receives the same tokens; a nested export has no
    notion of modes.

    Args:
        tokens: Flat {name: record} map
        theme_name: Theme to assemble under
        mode_names: Modes to populate (default: light and dark)

    Returns:
        A single theme record
    """
    modes = {mode_name: {name: dict(record) for name, record in tokens.items()} for mode_name in mode_names}
    return [{theme_name: {MODES_KEY: modes}}]


def assemble(
    document: Any,
    input_format: str | InputFormat,
    theme_name: str | None = None,
    mode_names: Sequence[str] = REQUIRED_MODES,
) -> ThemeRecords:
    """
    Normalize and assemble a raw export into theme records.

    Nested exports are flattened and their references rewritten to short
    names before assembly.

    Args:
        document: Parsed raw export
        input_format: Format discriminator
        theme_name: Theme for nested exports (required for tokens-studio)
        mode_names: Modes for nested exports

    Returns:
        Theme records ready for validation
    """
    fmt = parse_format(input_format)

    if fmt is InputFormat.FIGMA:
        records = assemble_collections(normalize_collections(document))
        logger.debug(f"Assembled {len(records)} collection(s)")
        return records

    if not theme_name:
        raise SchemaViolation(ErrorMessages.THEME_NAME_REQUIRED)

    flat = rewrite_references(flatten_nested(document), VALUE_KEY)
    logger.debug(f"Flattened {len(flat)} token(s) into theme '{theme_name}'")
    return assemble_nested(flat, theme_name, mode_names)


def build_table(records: Sequence[Mapping[str, Any]]) -> TokenTable:
    """
    Freeze validated theme records into a TokenTable.

    Records must have passed TokenValidator.validate_document(); a record
    that breaks the model invariants raises SchemaViolation.
    """
    document: dict[str, Any] = {}
    for record in records:
        theme_name = next(iter(record))
        document[theme_name] = record[theme_name][MODES_KEY]

    try:
        return TokenTable.from_document(document)
    except (KeyError, TypeError, ValueError) as e:
        raise SchemaViolation(f"Token table is invalid: {e}") from e
