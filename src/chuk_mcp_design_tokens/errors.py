"""
Error taxonomy for the token pipeline.

Every fatal condition raised by the core is a DesignTokenError carrying an
ErrorKind. The core never terminates the process; the CLI and MCP tools
decide what to do with the error.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of fatal pipeline errors."""

    INPUT_NOT_FOUND = "input_not_found"
    MALFORMED_INPUT = "malformed_input"
    SCHEMA_VIOLATION = "schema_violation"


class DesignTokenError(Exception):
    """Base class for fatal pipeline errors."""

    kind: ErrorKind = ErrorKind.MALFORMED_INPUT

    def __init__(self, message: str, location: str | None = None):
        super().__init__(message)
        self.message = message
        self.location = location

    def to_dict(self) -> dict[str, str]:
        """Convert to a JSON-serializable dictionary."""
        d = {"kind": self.kind.value, "message": self.message}
        if self.location:
            d["location"] = self.location
        return d


class InputNotFound(DesignTokenError):
    """The source document does not exist."""

    kind = ErrorKind.INPUT_NOT_FOUND


class MalformedInput(DesignTokenError):
    """The source document could not be parsed or has the wrong shape."""

    kind = ErrorKind.MALFORMED_INPUT


class SchemaViolation(DesignTokenError):
    """A theme, mode or token breaks a structural invariant."""

    kind = ErrorKind.SCHEMA_VIOLATION
