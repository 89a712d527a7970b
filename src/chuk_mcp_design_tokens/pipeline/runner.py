"""
Token pipeline - the full run from raw export to generated artifacts.

The pipeline:
    raw export → normalize → rewrite references (nested only)
    → assemble theme records → validate (fail fast)
    → TokenTable → generate artifacts (CSS, Tailwind, declarations)

Fatal errors never escape run(); they are returned in a PipelineResult
for the caller (CLI or MCP tool) to act on.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from chuk_mcp_design_tokens.constants import REQUIRED_MODES, InputFormat
from chuk_mcp_design_tokens.errors import DesignTokenError
from chuk_mcp_design_tokens.generators import (
    GeneratedArtifact,
    generate_css_variable_artifacts,
    generate_declaration_artifacts,
    generate_tailwind_artifacts,
)
from chuk_mcp_design_tokens.generators.css_variables import DEFAULT_SELECTOR
from chuk_mcp_design_tokens.models.token import TokenTable
from chuk_mcp_design_tokens.pipeline.assembler import assemble, build_table
from chuk_mcp_design_tokens.pipeline.validator import (
    TokenValidator,
    ValidationIssue,
    ValidationResult,
)
from chuk_mcp_design_tokens.storage.loader import load_document
from chuk_mcp_design_tokens.storage.writer import table_artifact

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    """Outcome of a pipeline run: artifacts on success, the error otherwise."""

    table: TokenTable | None = None
    artifacts: list[GeneratedArtifact] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)
    error: DesignTokenError | None = None
    written: list[Path] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        """True if the run completed without a fatal error."""
        return self.error is None

    @property
    def theme_names(self) -> list[str]:
        """Theme names of the built table."""
        return self.table.theme_names() if self.table is not None else []

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable summary."""
        d: dict[str, Any] = {
            "ok": self.ok,
            "themes": self.theme_names,
            "artifacts": [a.path for a in self.artifacts],
            "warnings": [w.to_dict() for w in self.warnings],
            "written": [str(p) for p in self.written],
        }
        if self.error is not None:
            d["error"] = self.error.to_dict()
        return d


class TokenPipeline:
    """
    Runs the token pipeline.

    The pipeline is stateless between runs; each run rebuilds the table
    from its source document.
    """

    def __init__(
        self,
        validator: TokenValidator | None = None,
        css_selector: str = DEFAULT_SELECTOR,
    ):
        """
        Initialize the pipeline.

        Args:
            validator: Validator to use (default: TokenValidator())
            css_selector: Selector of per-mode CSS sheets
        """
        self.validator = validator or TokenValidator()
        self.css_selector = css_selector

    def build_table(
        self,
        document: Any,
        input_format: str | InputFormat,
        theme_name: str | None = None,
        mode_names: Sequence[str] = REQUIRED_MODES,
        log_warnings: bool = True,
    ) -> tuple[TokenTable, ValidationResult]:
        """
        Normalize, assemble and validate a raw export.

        Args:
            document: Parsed raw export
            input_format: Format discriminator
            theme_name: Theme for nested exports
            mode_names: Modes for nested exports
            log_warnings: Log validation warnings as they are found

        Returns:
            The frozen table and the validation result (warnings only)

        Raises:
            DesignTokenError: On the first fatal error
        """
        records = assemble(document, input_format, theme_name, mode_names)

        result = self.validator.validate_document(records, log_warnings)
        result.raise_for_errors()

        table = build_table(records)

        references = self.validator.validate_references(table, log_warnings)
        references.raise_for_errors()
        result.merge(references)

        logger.info(f"Built token table: {len(table)} theme(s), {table.token_count()} token(s)")
        return table, result

    def generate(self, table: TokenTable) -> list[GeneratedArtifact]:
        """
        Generate every artifact for a table, in memory.

        Returns:
            Flattened table, CSS sheets, Tailwind bundle and declarations
        """
        return [
            table_artifact(table),
            *generate_css_variable_artifacts(table, self.css_selector),
            *generate_tailwind_artifacts(table),
            *generate_declaration_artifacts(table),
        ]

    def run(
        self,
        document: Any,
        input_format: str | InputFormat,
        theme_name: str | None = None,
        mode_names: Sequence[str] = REQUIRED_MODES,
        generate: bool = True,
        log_warnings: bool = True,
    ) -> PipelineResult:
        """
        Run the pipeline on a parsed document.

        Args:
            document: Parsed raw export
            input_format: Format discriminator
            theme_name: Theme for nested exports
            mode_names: Modes for nested exports
            generate: Generate artifacts (False stops after validation)
            log_warnings: Log validation warnings as they are found

        Returns:
            PipelineResult with the table and artifacts, or the error
        """
        try:
            table, validation = self.build_table(
                document, input_format, theme_name, mode_names, log_warnings
            )
        except DesignTokenError as e:
            logger.error(f"Token pipeline failed: {e.message}")
            return PipelineResult(error=e)

        artifacts = self.generate(table) if generate else [table_artifact(table)]
        return PipelineResult(table=table, artifacts=artifacts, warnings=validation.warnings)

    def run_file(
        self,
        path: Path,
        input_format: str | InputFormat,
        theme_name: str | None = None,
        mode_names: Sequence[str] = REQUIRED_MODES,
        generate: bool = True,
    ) -> PipelineResult:
        """Load a source file and run the pipeline on it."""
        try:
            document = load_document(path)
        except DesignTokenError as e:
            logger.error(f"Token pipeline failed: {e.message}")
            return PipelineResult(error=e)
        return self.run(document, input_format, theme_name, mode_names, generate)


def run_pipeline(
    document: Any,
    input_format: str | InputFormat,
    theme_name: str | None = None,
    mode_names: Sequence[str] = REQUIRED_MODES,
) -> PipelineResult:
    """
    Convenience function to run the full pipeline.

    Args:
        document: Parsed raw export
        input_format: Format discriminator
        theme_name: Theme for nested exports
        mode_names: Modes for nested exports

    Returns:
        PipelineResult
    """
    pipeline = TokenPipeline()
    return pipeline.run(document, input_format, theme_name, mode_names)
