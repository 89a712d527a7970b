"""
Format normalizer - converts raw exports into canonical token records.

Two input schemas are supported, each with its own entry point:

- Collection-based (figma): a list of single-key collections, each holding
  a 'modes' object of flat {name: {$type, $value}} maps.
- Nested path-based (tokens-studio): an arbitrarily deep object whose
  leaves carry 'value' and 'type' keys.

Both produce canonical records of the form {$type, $value[, $collectionName]}.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from chuk_mcp_design_tokens.constants import (
    COLLECTION_KEY,
    LEGACY_FLOAT_TYPE,
    MODES_KEY,
    NESTED_TYPE_KEY,
    NESTED_VALUE_KEY,
    SKIPPED_KEYS,
    TYPE_KEY,
    VALUE_KEY,
    ErrorMessages,
    InputFormat,
    TokenType,
)
from chuk_mcp_design_tokens.errors import MalformedInput

logger = logging.getLogger(__name__)

# {name: {$type, $value, ...}}
TokenRecords = dict[str, dict[str, Any]]


def coerce_type(token_type: Any) -> Any:
    """Rewrite the legacy 'float' type to 'dimension'."""
    if token_type == LEGACY_FLOAT_TYPE:
        return TokenType.DIMENSION.value
    return token_type


def parse_leaf(node: Any) -> dict[str, Any] | None:
    """
    Try to interpret a node as a token leaf.

    A leaf is an object with both 'value' and 'type' keys (nested export)
    or both '$value' and '$type' keys (already canonical).

    Args:
        node: Any node of a nested export

    Returns:
        A canonical {$type, $value} record, or None if the node is a container
        or a scalar
    """
    if not isinstance(node, Mapping):
        return None
    if NESTED_VALUE_KEY in node and NESTED_TYPE_KEY in node:
        return {TYPE_KEY: coerce_type(node[NESTED_TYPE_KEY]), VALUE_KEY: node[NESTED_VALUE_KEY]}
    if VALUE_KEY in node and TYPE_KEY in node:
        return {TYPE_KEY: coerce_type(node[TYPE_KEY]), VALUE_KEY: node[VALUE_KEY]}
    return None


def flatten_nested(document: Mapping[str, Any]) -> TokenRecords:
    """
    Flatten a nested path-based export into a single-level token map.

    Walks depth-first. '$metadata' and '$themes' keys are skipped at every
    depth. Leaves are keyed by their own key, not their dotted path, so two
    leaves with the same key in different branches collide and the later one
    wins. Flattening an already flat map returns an equal map.

    Args:
        document: Parsed nested export

    Returns:
        Flat {name: {$type, $value}} map in walk order
    """
    if not isinstance(document, Mapping):
        raise MalformedInput(ErrorMessages.NOT_A_MAPPING)

    flat: TokenRecords = {}

    def walk(node: Mapping[str, Any], path: tuple[str, ...]) -> None:
        for key, child in node.items():
            if key in SKIPPED_KEYS:
                continue

            record = parse_leaf(child)
            if record is not None:
                if key in flat:
                    logger.debug(f"Token '{key}' at {'.'.join((*path, key))} overrides earlier leaf")
                # An overridden name keeps its first position
                flat[key] = record
            elif isinstance(child, Mapping):
                walk(child, (*path, key))

    walk(document, ())
    return flat


def normalize_collections(document: Any) -> list[dict[str, Any]]:
    """
    Normalize a collection-based export.

    Every mode entry carrying both '$type' and '$value' is copied, with
    'float' rewritten to 'dimension' and the collection name attached.
    Entries missing either field are skipped. Collections or modes that are
    not objects are passed through unchanged so the validator can report
    them.

    Args:
        document: Parsed collection-based export

    Returns:
        Theme records: [{collection: {"modes": {mode: {name: record}}}}]
    """
    if not isinstance(document, list):
        raise MalformedInput(ErrorMessages.NOT_A_SEQUENCE)

    records: list[dict[str, Any]] = []

    for index, collection in enumerate(document):
        if not isinstance(collection, Mapping) or not collection:
            raise MalformedInput(ErrorMessages.INVALID_COLLECTION.format(index=index))

        collection_name = next(iter(collection))
        collection_data = collection[collection_name]

        modes = collection_data.get(MODES_KEY) if isinstance(collection_data, Mapping) else None
        if not isinstance(modes, Mapping):
            records.append({collection_name: collection_data})
            continue

        normalized_modes: dict[str, Any] = {}
        for mode_name, mode_data in modes.items():
            if not isinstance(mode_data, Mapping):
                normalized_modes[mode_name] = mode_data
                continue
            normalized_modes[mode_name] = _normalize_mode(collection_name, mode_data)

        records.append({collection_name: {**collection_data, MODES_KEY: normalized_modes}})

    return records


def _normalize_mode(collection_name: str, mode_data: Mapping[str, Any]) -> TokenRecords:
    """Copy the {$type, $value} entries of one mode."""
    tokens: TokenRecords = {}
    for name, entry in mode_data.items():
        if not isinstance(entry, Mapping) or TYPE_KEY not in entry or VALUE_KEY not in entry:
            continue
        tokens[name] = {
            **entry,
            TYPE_KEY: coerce_type(entry[TYPE_KEY]),
            COLLECTION_KEY: collection_name,
        }
    return tokens


def parse_format(value: str | InputFormat) -> InputFormat:
    """
    Parse a format discriminator.

    Accepts the enum value ('figma', 'tokens-studio') or an InputFormat.

    Raises:
        MalformedInput: If the discriminator is unknown
    """
    if isinstance(value, InputFormat):
        return value
    try:
        return InputFormat(value)
    except ValueError:
        choices = ", ".join(f.value for f in InputFormat)
        raise MalformedInput(
            ErrorMessages.UNKNOWN_FORMAT.format(format=value, choices=choices)
        ) from None
