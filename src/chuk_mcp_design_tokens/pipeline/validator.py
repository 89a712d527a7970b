"""
Token Validator - validates theme/mode/token structure before generation.

Checks, in order, stopping at the first error:
- Input is a non-empty array of theme records
- Each theme has a 'modes' object
- Each theme defines both 'light' and 'dark'
- Each mode is an object and each token has $type and a scalar $value
- Unknown token types (warning only, never stops the run)
- Circular references (error) and dangling references (warning)
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from chuk_mcp_design_tokens.constants import (
    MODES_KEY,
    RAW_TOKEN_TYPES,
    REQUIRED_MODES,
    TYPE_KEY,
    VALUE_KEY,
    ErrorMessages,
)
from chuk_mcp_design_tokens.errors import SchemaViolation
from chuk_mcp_design_tokens.models.token import TokenTable
from chuk_mcp_design_tokens.pipeline.references import (
    find_dangling_references,
    find_reference_cycles,
)

logger = logging.getLogger(__name__)


class ValidationSeverity(str, Enum):
    """Severity level for validation issues."""

    ERROR = "error"  # Stops the run
    WARNING = "warning"  # Logged, generation continues


@dataclass
class ValidationIssue:
    """A single validation issue."""

    severity: ValidationSeverity
    code: str
    message: str
    location: str | None = None

    def __str__(self) -> str:
        prefix = f"[{self.severity.value.upper()}]"
        location = f" at {self.location}" if self.location else ""
        return f"{prefix} {self.code}: {self.message}{location}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "location": self.location,
        }


class ValidationResult:
    """Result of validating a token document or table."""

    def __init__(self, log_warnings: bool = True) -> None:
        self.issues: list[ValidationIssue] = []
        self.theme_count = 0
        self.log_warnings = log_warnings

    def add_error(self, code: str, message: str, location: str | None = None) -> None:
        """Add an error issue."""
        self.issues.append(ValidationIssue(ValidationSeverity.ERROR, code, message, location))

    def add_warning(self, code: str, message: str, location: str | None = None) -> None:
        """Add a warning issue and log it (unless logging is off)."""
        if self.log_warnings:
            logger.warning(message)
        self.issues.append(ValidationIssue(ValidationSeverity.WARNING, code, message, location))

    @property
    def is_valid(self) -> bool:
        """Return True if no errors (warnings are OK)."""
        return not any(i.severity == ValidationSeverity.ERROR for i in self.issues)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning issues."""
        return [i for i in self.issues if i.severity == ValidationSeverity.WARNING]

    def merge(self, other: ValidationResult) -> None:
        """Append the issues of another result."""
        self.issues.extend(other.issues)

    def raise_for_errors(self) -> None:
        """
        Raise SchemaViolation for the first error, if any.

        Raises:
            SchemaViolation: Naming the offending theme/mode/token
        """
        for issue in self.errors:
            raise SchemaViolation(issue.message, location=issue.location)

    def __bool__(self) -> bool:
        """Boolean conversion returns is_valid."""
        return self.is_valid

    def __str__(self) -> str:
        if not self.issues:
            return "Validation passed: no issues found"
        return "\n".join(str(issue) for issue in self.issues)


class TokenValidator:
    """Validates token structure, stopping at the first error."""

    def validate_document(self, document: Any, log_warnings: bool = True) -> ValidationResult:
        """
        Validate a collection-based export or assembled theme records.

        Args:
            document: [{theme: {"modes": {mode: {name: {$type, $value}}}}}]
            log_warnings: Log warnings as they are found

        Returns:
            ValidationResult holding at most one error
        """
        result = ValidationResult(log_warnings)

        if not isinstance(document, list):
            result.add_error("NOT_A_SEQUENCE", ErrorMessages.NOT_A_SEQUENCE)
            return result

        if not document:
            result.add_error("EMPTY_INPUT", ErrorMessages.EMPTY_INPUT)
            return result

        for index, record in enumerate(document):
            if not isinstance(record, Mapping) or not record:
                result.add_error(
                    "INVALID_THEME_RECORD",
                    ErrorMessages.INVALID_COLLECTION.format(index=index),
                    f"[{index}]",
                )
                return result

            theme_name = next(iter(record))
            if not self._validate_theme(theme_name, record[theme_name], result):
                return result

        result.theme_count = len(document)
        return result

    def validate_table(self, table: TokenTable) -> ValidationResult:
        """
        Validate a canonical table, such as one read back with load_table().

        Runs the structural checks on the table's records, then the
        reference check.
        """
        records = [
            {theme_name: {MODES_KEY: modes}} for theme_name, modes in table.to_document().items()
        ]
        result = self.validate_document(records)
        if result.is_valid:
            result.merge(self.validate_references(table))
        return result

    def validate_references(self, table: TokenTable, log_warnings: bool = True) -> ValidationResult:
        """
        Check token references within each mode of a table.

        Circular references are errors. References to tokens missing from
        the mode are warnings; they may point at another collection and are
        left for the consumer to resolve.
        """
        result = ValidationResult(log_warnings)
        result.theme_count = len(table)

        for theme_name, theme in table.themes.items():
            for mode_name, mode in theme.modes.items():
                cycles = find_reference_cycles(mode)
                if cycles:
                    result.add_error(
                        "CIRCULAR_REFERENCE",
                        ErrorMessages.CIRCULAR_REFERENCE.format(
                            theme=theme_name, mode=mode_name, cycle=" -> ".join(cycles[0])
                        ),
                        f"{theme_name}/{mode_name}/{cycles[0][0]}",
                    )
                    return result

                for token_name, ref in find_dangling_references(mode):
                    result.add_warning(
                        "DANGLING_REFERENCE",
                        ErrorMessages.DANGLING_REFERENCE.format(
                            token=token_name, theme=theme_name, mode=mode_name, ref=ref
                        ),
                        f"{theme_name}/{mode_name}/{token_name}",
                    )

        return result

    def _validate_theme(self, theme_name: str, theme: Any, result: ValidationResult) -> bool:
        """Validate one theme record. Returns False on the first error."""
        modes = theme.get(MODES_KEY) if isinstance(theme, Mapping) else None
        if not isinstance(modes, Mapping):
            result.add_error(
                "MISSING_MODES",
                ErrorMessages.MISSING_MODES.format(theme=theme_name),
                theme_name,
            )
            return False

        if any(modes.get(mode_name) is None for mode_name in REQUIRED_MODES):
            result.add_error(
                "MISSING_MODE",
                ErrorMessages.MISSING_MODE.format(theme=theme_name),
                f"{theme_name}/modes",
            )
            return False

        for mode_name, tokens in modes.items():
            if not self._validate_mode(theme_name, mode_name, tokens, result):
                return False

        return True

    def _validate_mode(
        self, theme_name: str, mode_name: str, tokens: Any, result: ValidationResult
    ) -> bool:
        """Validate the tokens of one mode. Returns False on the first error."""
        if not isinstance(tokens, Mapping):
            result.add_error(
                "INVALID_MODE",
                ErrorMessages.INVALID_MODE.format(theme=theme_name, mode=mode_name),
                f"{theme_name}/{mode_name}",
            )
            return False

        for token_name, token in tokens.items():
            location = f"{theme_name}/{mode_name}/{token_name}"

            if (
                not isinstance(token, Mapping)
                or not isinstance(token.get(TYPE_KEY), str)
                or not token[TYPE_KEY]
                or token.get(VALUE_KEY) is None
            ):
                result.add_error(
                    "MISSING_TYPE_OR_VALUE",
                    ErrorMessages.MISSING_TYPE_OR_VALUE.format(
                        token=token_name, theme=theme_name, mode=mode_name
                    ),
                    location,
                )
                return False

            if not isinstance(token[VALUE_KEY], bool | int | float | str):
                result.add_error(
                    "INVALID_VALUE",
                    ErrorMessages.INVALID_VALUE.format(
                        token=token_name, theme=theme_name, mode=mode_name
                    ),
                    location,
                )
                return False

            if token[TYPE_KEY] not in RAW_TOKEN_TYPES:
                result.add_warning(
                    "UNKNOWN_TOKEN_TYPE",
                    ErrorMessages.UNKNOWN_TOKEN_TYPE.format(
                        token=token_name, theme=theme_name, mode=mode_name, type=token[TYPE_KEY]
                    ),
                    location,
                )

        return True


def validate_tokens(document: Any) -> ValidationResult:
    """
    Convenience function to validate a collection-based export.

    Args:
        document: Parsed export or assembled theme records

    Returns:
        ValidationResult with any issues found
    """
    validator = TokenValidator()
    return validator.validate_document(document)
