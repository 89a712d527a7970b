"""
Token builder - runs the pipeline for a BuildConfig and writes the results.

Used by both the CLI and the MCP tools. Nothing is written unless the whole
table validates, every artifact has been generated, and every artifact path
lies under the output root.
"""

from __future__ import annotations

import logging

from chuk_mcp_design_tokens.config import BuildConfig
from chuk_mcp_design_tokens.constants import InputFormat
from chuk_mcp_design_tokens.errors import DesignTokenError
from chuk_mcp_design_tokens.pipeline.runner import PipelineResult, TokenPipeline
from chuk_mcp_design_tokens.storage.loader import load_document
from chuk_mcp_design_tokens.storage.writer import ArtifactWriter

logger = logging.getLogger(__name__)


class TokenBuilder:
    """Validates, flattens and builds token sources described by a config."""

    def __init__(self, config: BuildConfig, pipeline: TokenPipeline | None = None):
        """
        Initialize the builder.

        Args:
            config: Build configuration
            pipeline: Pipeline to use (default: TokenPipeline with the config's selector)
        """
        self.config = config
        self.pipeline = pipeline or TokenPipeline(css_selector=config.css_selector)

    def validate(self) -> PipelineResult:
        """
        Validate the source without writing anything.

        Collection-based sources are checked as exported, so entries the
        normalizer would skip (missing $type or $value) are reported. Their
        advisory warnings come from this raw check; the pipeline run then
        only adds its reference warnings.
        """
        try:
            document = load_document(self.config.source_path())
        except DesignTokenError as e:
            logger.error(f"Validation failed: {e.message}")
            return PipelineResult(error=e)

        if self.config.input_format is not InputFormat.FIGMA:
            return self._run(document, generate=False)

        raw = self.pipeline.validator.validate_document(document)
        try:
            raw.raise_for_errors()
        except DesignTokenError as e:
            logger.error(f"Validation failed: {e.message}")
            return PipelineResult(error=e)

        result = self._run(document, generate=False, log_warnings=False)
        if result.ok:
            seen = {(w.code, w.location) for w in raw.warnings}
            extra = [w for w in result.warnings if (w.code, w.location) not in seen]
            for warning in extra:
                logger.warning(warning.message)
            result.warnings = raw.warnings + extra
        return result

    def flatten(self) -> PipelineResult:
        """Build the table and write only the flattened table document."""
        return self._write(self._load_and_run(generate=False))

    def build(self) -> PipelineResult:
        """Build the table and write every artifact."""
        result = self._write(self._load_and_run(generate=True))
        if result.ok:
            logger.info(f"Wrote {len(result.written)} file(s) to {self.config.output_dir}")
        return result

    def _write(self, result: PipelineResult) -> PipelineResult:
        if not result.ok:
            return result
        try:
            result.written = ArtifactWriter(self.config.output_dir).write(result.artifacts)
        except DesignTokenError as e:
            logger.error(f"Build failed: {e.message}")
            return PipelineResult(table=result.table, warnings=result.warnings, error=e)
        return result

    def _load_and_run(self, generate: bool) -> PipelineResult:
        try:
            document = load_document(self.config.source_path())
        except DesignTokenError as e:
            logger.error(f"Build failed: {e.message}")
            return PipelineResult(error=e)
        return self._run(document, generate)

    def _run(self, document: object, generate: bool, log_warnings: bool = True) -> PipelineResult:
        return self.pipeline.run(
            document,
            self.config.input_format,
            theme_name=self.config.theme_name(),
            mode_names=self.config.modes,
            generate=generate,
            log_warnings=log_warnings,
        )
