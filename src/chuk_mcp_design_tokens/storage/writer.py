"""
Artifact writer - writes generated artifacts under an output root.

Writes happen only after every artifact has been generated in memory, so
a failed run writes nothing. A failure part-way through writing is not
rolled back.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from chuk_mcp_design_tokens.constants import FLATTENED_FILENAME, ErrorMessages
from chuk_mcp_design_tokens.errors import SchemaViolation
from chuk_mcp_design_tokens.generators.artifact import GeneratedArtifact
from chuk_mcp_design_tokens.models.token import TokenTable

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Writes artifacts and the flattened table to an output root."""

    def __init__(self, output_dir: Path):
        """
        Initialize the writer.

        Args:
            output_dir: Output root
        """
        self.output_dir = output_dir

    def write(self, artifacts: Iterable[GeneratedArtifact]) -> list[Path]:
        """
        Write artifacts, creating directories as needed.

        Every target is checked before the first write; theme and mode
        names come from the source document.

        Returns:
            Paths written, in artifact order

        Raises:
            SchemaViolation: If an artifact path resolves outside the output root
        """
        targets = [(self.target_path(artifact), artifact) for artifact in artifacts]

        written: list[Path] = []
        for path, artifact in targets:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(artifact.content, encoding="utf-8")
            logger.debug(f"Wrote {path}")
            written.append(path)
        return written

    def target_path(self, artifact: GeneratedArtifact) -> Path:
        """
        Path of an artifact under the output root.

        Raises:
            SchemaViolation: If the path escapes the output root
        """
        path = self.output_dir / artifact.path
        root = self.output_dir.resolve()
        resolved = path.resolve()
        if resolved == root or not resolved.is_relative_to(root):
            raise SchemaViolation(
                ErrorMessages.OUTSIDE_OUTPUT_DIR.format(path=artifact.path, output_dir=self.output_dir),
                location=artifact.path,
            )
        return path

    def write_table(self, table: TokenTable, filename: str = FLATTENED_FILENAME) -> Path:
        """
        Write the flattened table as JSON.

        Returns:
            Path of the written file
        """
        return self.write([table_artifact(table, filename)])[0]


def table_artifact(table: TokenTable, filename: str = FLATTENED_FILENAME) -> GeneratedArtifact:
    """Render the flattened table document (2-space indented JSON)."""
    content = json.dumps(table.to_document(), indent=2, ensure_ascii=False)
    return GeneratedArtifact(path=filename, content=content)
