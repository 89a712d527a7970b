"""
Tests for the token validator.

Tests cover:
- Structural checks, stopping at the first error
- Unknown token types (warning only)
- Circular and dangling references
"""

import copy

import pytest

from chuk_mcp_design_tokens.errors import SchemaViolation
from chuk_mcp_design_tokens.models import TokenTable
from chuk_mcp_design_tokens.pipeline import (
    TokenValidator,
    ValidationResult,
    ValidationSeverity,
    validate_tokens,
)


def _theme(light: dict, dark: dict | None = None, name: str = "amsterdam") -> list[dict]:
    modes = {"light": light}
    if dark is not None:
        modes["dark"] = dark
    return [{name: {"modes": modes}}]


class TestValidationResult:
    """Tests for ValidationResult."""

    def test_empty_result_is_valid(self) -> None:
        """A result without issues is valid."""
        result = ValidationResult()
        assert result.is_valid
        assert bool(result)
        assert "no issues" in str(result)

    def test_warnings_keep_result_valid(self) -> None:
        """Warnings never invalidate a result."""
        result = ValidationResult()
        result.add_warning("X", "just a warning")
        assert result.is_valid
        assert len(result.warnings) == 1
        result.raise_for_errors()

    def test_raise_for_errors(self) -> None:
        """The first error is raised with its location."""
        result = ValidationResult()
        result.add_error("X", "first", "a/b")
        result.add_error("Y", "second")
        with pytest.raises(SchemaViolation, match="first") as exc_info:
            result.raise_for_errors()
        assert exc_info.value.location == "a/b"

    def test_merge(self) -> None:
        """Merged issues are appended."""
        a = ValidationResult()
        a.add_warning("X", "one")
        b = ValidationResult()
        b.add_error("Y", "two")
        a.merge(b)
        assert len(a.issues) == 2
        assert not a.is_valid


class TestValidateDocument:
    """Tests for TokenValidator.validate_document."""

    def test_valid_document(self, figma_document: list) -> None:
        """A well-formed export passes without issues."""
        result = validate_tokens(figma_document)
        assert result.is_valid
        assert result.issues == []
        assert result.theme_count == 2

    def test_not_a_list(self) -> None:
        """The document must be an array."""
        result = validate_tokens({"amsterdam": {}})
        assert result.errors[0].code == "NOT_A_SEQUENCE"

    def test_empty_document(self) -> None:
        """At least one theme is required."""
        result = validate_tokens([])
        assert result.errors[0].code == "EMPTY_INPUT"

    def test_missing_modes(self) -> None:
        """Themes need a modes object."""
        result = validate_tokens([{"amsterdam": {"variables": {}}}])
        assert result.errors[0].code == "MISSING_MODES"
        assert "amsterdam" in result.errors[0].message

    def test_missing_dark_names_theme(self) -> None:
        """A theme without dark fails and the message names the theme."""
        result = validate_tokens(_theme({"primary": {"$type": "color", "$value": "#000"}}))
        assert not result.is_valid
        error = result.errors[0]
        assert error.code == "MISSING_MODE"
        assert "amsterdam" in error.message
        assert error.location == "amsterdam/modes"

    def test_mode_must_be_object(self) -> None:
        """Mode contents must be objects."""
        result = validate_tokens(_theme({}, "nope"))  # type: ignore[arg-type]
        assert result.errors[0].code == "INVALID_MODE"

    def test_missing_value(self) -> None:
        """Tokens need both $type and $value."""
        result = validate_tokens(_theme({"primary": {"$type": "color"}}, {}))
        error = result.errors[0]
        assert error.code == "MISSING_TYPE_OR_VALUE"
        assert error.location == "amsterdam/light/primary"

    def test_null_value_counts_as_missing(self) -> None:
        """A null $value is treated as absent."""
        result = validate_tokens(_theme({}, {"primary": {"$type": "color", "$value": None}}))
        assert result.errors[0].code == "MISSING_TYPE_OR_VALUE"

    def test_non_scalar_value(self) -> None:
        """Composite values are rejected."""
        result = validate_tokens(
            _theme({"shadow": {"$type": "color", "$value": {"x": 1}}}, {})
        )
        assert result.errors[0].code == "INVALID_VALUE"

    def test_unknown_type_warns_and_continues(self) -> None:
        """An unknown type is a warning; later themes are still checked."""
        document = _theme({"sunset": {"$type": "gradient", "$value": "linear-gradient()"}}, {})
        document.append({"rotterdam": {"modes": {"light": {}}}})

        result = validate_tokens(document)
        assert [w.code for w in result.warnings] == ["UNKNOWN_TOKEN_TYPE"]
        assert result.warnings[0].severity == ValidationSeverity.WARNING
        assert result.errors[0].code == "MISSING_MODE"
        assert "rotterdam" in result.errors[0].message

    def test_unknown_type_alone_is_valid(self) -> None:
        """A document whose only issue is an unknown type is valid."""
        result = validate_tokens(
            _theme({"sunset": {"$type": "gradient", "$value": "x"}}, {})
        )
        assert result.is_valid
        assert len(result.warnings) == 1

    def test_stops_at_first_error(self, figma_document: list) -> None:
        """Only the first error is reported."""
        document = copy.deepcopy(figma_document)
        del document[0]["theme-amsterdam"]["modes"]["dark"]
        del document[1]["design-system"]["modes"]["light"]
        result = validate_tokens(document)
        assert len(result.errors) == 1
        assert "theme-amsterdam" in result.errors[0].message


class TestValidateReferences:
    """Tests for TokenValidator.validate_references."""

    def _table(self, light: dict) -> TokenTable:
        return TokenTable.from_document({"t": {"light": light, "dark": {}}})

    def test_circular_reference_is_error(self) -> None:
        """Reference cycles are fatal."""
        table = self._table(
            {
                "a": {"$type": "color", "$value": "{b}"},
                "b": {"$type": "color", "$value": "{a}"},
            }
        )
        result = TokenValidator().validate_references(table)
        assert result.errors[0].code == "CIRCULAR_REFERENCE"
        assert "a -> b -> a" in result.errors[0].message

    def test_dangling_reference_is_warning(self) -> None:
        """References to missing tokens only warn."""
        table = self._table({"a": {"$type": "color", "$value": "{missing}"}})
        result = TokenValidator().validate_references(table)
        assert result.is_valid
        assert result.warnings[0].code == "DANGLING_REFERENCE"
        assert "{missing}" in result.warnings[0].message


class TestValidateTable:
    """Tests for TokenValidator.validate_table."""

    def test_valid_table(self) -> None:
        """A complete table passes."""
        table = TokenTable.from_document(
            {"t": {"light": {"a": {"$type": "color", "$value": "#000"}}, "dark": {}}}
        )
        result = TokenValidator().validate_table(table)
        assert result.is_valid
        assert result.theme_count == 1

    def test_missing_mode(self) -> None:
        """Tables read back without a dark mode fail."""
        table = TokenTable.from_document({"t": {"light": {}}})
        result = TokenValidator().validate_table(table)
        assert result.errors[0].code == "MISSING_MODE"

    def test_empty_table(self) -> None:
        """An empty table has no themes."""
        result = TokenValidator().validate_table(TokenTable())
        assert result.errors[0].code == "EMPTY_INPUT"

    def test_reference_check(self) -> None:
        """References are checked once the structure is valid."""
        table = TokenTable.from_document(
            {"t": {"light": {"a": {"$type": "color", "$value": "{b}"}}, "dark": {}}}
        )
        result = TokenValidator().validate_table(table)
        assert result.is_valid
        assert result.warnings[0].code == "DANGLING_REFERENCE"
