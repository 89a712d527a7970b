"""
Generated artifacts - text outputs keyed by their path under the output root.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GeneratedArtifact:
    """A generated text file, not yet written."""

    path: str  # POSIX path relative to the output root
    content: str

    @property
    def size(self) -> int:
        """Content length in bytes (UTF-8)."""
        return len(self.content.encode("utf-8"))
