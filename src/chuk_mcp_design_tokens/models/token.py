"""
Token model - the canonical, format-independent token table.

A TokenTable contains:
- Themes (a brand or product line), keyed by name
- Modes per theme (light, dark), keyed by name
- Tokens per mode, keyed by name, in source order

This is the single structure every generator consumes. It is frozen once
built; generators only read it.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field

from chuk_mcp_design_tokens.constants import (
    COLLECTION_KEY,
    THEME_PREFIX,
    TYPE_KEY,
    VALUE_KEY,
    ModeName,
    TokenType,
)

# A literal scalar, or a string holding one or more {name} placeholders
TokenValue = bool | int | float | str

REFERENCE_PATTERN = re.compile(r"\{([^}]+)\}")


class Token(BaseModel):
    """
    A named design value with a declared type.

    The type is kept as a plain string so unknown types survive
    normalization; the validator reports them as warnings.
    """

    name: str = Field(..., min_length=1, description="Token name, unique within its mode")
    type: str = Field(..., description="Token type (color, dimension, ...)")
    value: TokenValue = Field(..., description="Literal value or {reference}")
    source_collection: str | None = Field(
        None, description="Collection the token was exported from"
    )

    model_config = {"frozen": True}

    @property
    def token_type(self) -> TokenType | None:
        """The known token type, or None for an unrecognized one."""
        try:
            return TokenType(self.type)
        except ValueError:
            return None

    @property
    def is_reference(self) -> bool:
        """True if the value contains at least one {name} placeholder."""
        return isinstance(self.value, str) and REFERENCE_PATTERN.search(self.value) is not None

    @property
    def is_numeric_dimension(self) -> bool:
        """True for dimension tokens whose value is a bare number."""
        return (
            self.type == TokenType.DIMENSION.value
            and isinstance(self.value, int | float)
            and not isinstance(self.value, bool)
        )

    def to_record(self) -> dict[str, Any]:
        """Convert to a {$type, $value} record."""
        record: dict[str, Any] = {TYPE_KEY: self.type, VALUE_KEY: self.value}
        if self.source_collection:
            record[COLLECTION_KEY] = self.source_collection
        return record

    @classmethod
    def from_record(cls, name: str, record: dict[str, Any]) -> Token:
        """Create from a {$type, $value} record."""
        return cls(
            name=name,
            type=record[TYPE_KEY],
            value=record[VALUE_KEY],
            source_collection=record.get(COLLECTION_KEY),
        )


class Mode(BaseModel):
    """One variant (light or dark) of a theme's token set."""

    name: str = Field(..., description="Mode name")
    tokens: dict[str, Token] = Field(default_factory=dict, description="Tokens by name")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.tokens)

    def __contains__(self, name: object) -> bool:
        return name in self.tokens

    def get(self, name: str) -> Token | None:
        """Get a token by name."""
        return self.tokens.get(name)

    def token_names(self) -> list[str]:
        """Token names in insertion order."""
        return list(self.tokens)

    def to_document(self) -> dict[str, Any]:
        """Convert to a {name: record} mapping."""
        return {name: token.to_record() for name, token in self.tokens.items()}

    @classmethod
    def from_document(cls, name: str, data: dict[str, Any]) -> Mode:
        """Create from a {name: record} mapping."""
        return cls(
            name=name,
            tokens={token_name: Token.from_record(token_name, rec) for token_name, rec in data.items()},
        )


class Theme(BaseModel):
    """A named collection of tokens, split into modes."""

    name: str = Field(..., min_length=1, description="Theme name")
    modes: dict[str, Mode] = Field(default_factory=dict, description="Modes by name")

    model_config = {"frozen": True}

    @property
    def clean_name(self) -> str:
        """Theme name without a leading 'theme-' prefix."""
        return strip_theme_prefix(self.name)

    @property
    def light(self) -> Mode:
        """The light mode."""
        return self.get_mode(ModeName.LIGHT.value)

    @property
    def dark(self) -> Mode:
        """The dark mode."""
        return self.get_mode(ModeName.DARK.value)

    def get_mode(self, name: str) -> Mode:
        """Get a mode by name, raising KeyError if missing."""
        if name not in self.modes:
            raise KeyError(f"Theme '{self.name}' has no mode '{name}'")
        return self.modes[name]

    def to_document(self) -> dict[str, Any]:
        """Convert to a {mode: {name: record}} mapping."""
        return {mode_name: mode.to_document() for mode_name, mode in self.modes.items()}


class TokenTable(BaseModel):
    """
    The canonical token table: theme -> mode -> token.

    Built once per run from a single source document.
    """

    themes: dict[str, Theme] = Field(default_factory=dict, description="Themes by name")

    model_config = {"frozen": True}

    def __len__(self) -> int:
        return len(self.themes)

    def theme_names(self) -> list[str]:
        """Theme names in insertion order."""
        return list(self.themes)

    def first_theme(self) -> Theme | None:
        """The first theme in insertion order, if any."""
        for theme in self.themes.values():
            return theme
        return None

    def token_count(self) -> int:
        """Total number of tokens across all themes and modes."""
        return sum(len(mode) for theme in self.themes.values() for mode in theme.modes.values())

    def to_document(self) -> dict[str, Any]:
        """
        Convert to the flattened document shape.

        The result is {theme: {mode: {token: {$type, $value, $collectionName}}}}
        and can be read back with from_document().
        """
        return {theme_name: theme.to_document() for theme_name, theme in self.themes.items()}

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> TokenTable:
        """Create from the flattened document shape."""
        return cls(
            themes={
                theme_name: Theme(
                    name=theme_name,
                    modes={
                        mode_name: Mode.from_document(mode_name, tokens)
                        for mode_name, tokens in modes.items()
                    },
                )
                for theme_name, modes in data.items()
            }
        )


def strip_theme_prefix(name: str) -> str:
    """Remove a leading 'theme-' (theme-amsterdam -> amsterdam)."""
    if name.startswith(THEME_PREFIX):
        return name[len(THEME_PREFIX) :]
    return name
