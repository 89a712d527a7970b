"""
Token pipeline - normalization, reference rewriting, assembly, validation.

The pipeline:
    Raw export (collection-based or nested)
    → Token records (normalized, references shortened)
    → Theme records (theme → mode → token)
    → Validation (fail fast, warnings logged)
    → TokenTable (frozen)
"""

from chuk_mcp_design_tokens.pipeline.assembler import (
    assemble,
    assemble_collections,
    assemble_nested,
    build_table,
)
from chuk_mcp_design_tokens.pipeline.normalizer import (
    flatten_nested,
    normalize_collections,
    parse_format,
    parse_leaf,
)
from chuk_mcp_design_tokens.pipeline.references import (
    find_dangling_references,
    find_reference_cycles,
    reference_names,
    rewrite_reference,
    rewrite_references,
)
from chuk_mcp_design_tokens.pipeline.runner import (
    PipelineResult,
    TokenPipeline,
    run_pipeline,
)
from chuk_mcp_design_tokens.pipeline.validator import (
    TokenValidator,
    ValidationIssue,
    ValidationResult,
    ValidationSeverity,
    validate_tokens,
)

__all__ = [
    "PipelineResult",
    "TokenPipeline",
    "TokenValidator",
    "ValidationIssue",
    "ValidationResult",
    "ValidationSeverity",
    "assemble",
    "assemble_collections",
    "assemble_nested",
    "build_table",
    "find_dangling_references",
    "find_reference_cycles",
    "flatten_nested",
    "normalize_collections",
    "parse_format",
    "parse_leaf",
    "reference_names",
    "rewrite_reference",
    "rewrite_references",
    "run_pipeline",
    "validate_tokens",
]
