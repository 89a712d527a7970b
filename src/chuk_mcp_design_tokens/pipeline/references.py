"""
Reference rewriting and reference checks.

Nested exports reference tokens by dotted path ({color.blue.500}). After
flattening, tokens are keyed by their own short name, so references are
rewritten to the last path segment ({500}).
"""

from __future__ import annotations

import re
from typing import Any

from chuk_mcp_design_tokens.models.token import REFERENCE_PATTERN, Mode


def _shorten(match: re.Match[str]) -> str:
    return "{" + match.group(1).split(".")[-1] + "}"


def rewrite_reference(value: Any) -> Any:
    """
    Rewrite every {a.b.c} placeholder in a value to {c}.

    Non-string values and strings without placeholders are returned
    unchanged. No existence check is performed.

    Args:
        value: Raw token value

    Returns:
        The value with shortened references
    """
    if not isinstance(value, str) or "{" not in value:
        return value
    return REFERENCE_PATTERN.sub(_shorten, value)


def rewrite_references(tokens: dict[str, dict[str, Any]], value_key: str) -> dict[str, dict[str, Any]]:
    """
    Rewrite references in every record of a flat token map.

    Args:
        tokens: Flat {name: record} map
        value_key: Key holding the value in each record

    Returns:
        A new map with rewritten values
    """
    return {
        name: {**record, value_key: rewrite_reference(record.get(value_key))}
        for name, record in tokens.items()
    }


def reference_names(value: Any) -> list[str]:
    """List the placeholder bodies of a value, in order."""
    if not isinstance(value, str):
        return []
    return REFERENCE_PATTERN.findall(value)


def find_dangling_references(mode: Mode) -> list[tuple[str, str]]:
    """
    Find references that do not name a token in the same mode.

    Returns:
        (token name, referenced name) pairs in token order
    """
    dangling: list[tuple[str, str]] = []
    for name, token in mode.tokens.items():
        for ref in reference_names(token.value):
            if ref not in mode.tokens:
                dangling.append((name, ref))
    return dangling


def find_reference_cycles(mode: Mode) -> list[list[str]]:
    """
    Find circular references within a mode.

    Each cycle is reported once, as the path of token names starting and
    ending at the same token (e.g. ['a', 'b', 'a']).
    """
    graph = {
        name: [ref for ref in reference_names(token.value) if ref in mode.tokens]
        for name, token in mode.tokens.items()
    }

    cycles: list[list[str]] = []
    done: set[str] = set()

    def visit(name: str, path: list[str], on_path: set[str]) -> None:
        for ref in graph[name]:
            if ref in on_path:
                cycles.append(path[path.index(ref) :] + [ref])
            elif ref not in done:
                path.append(ref)
                on_path.add(ref)
                visit(ref, path, on_path)
                on_path.discard(ref)
                path.pop()
        done.add(name)

    for name in graph:
        if name not in done:
            visit(name, [name], {name})

    return cycles
