"""
Storage - reading token sources and writing generated artifacts.
"""

from chuk_mcp_design_tokens.storage.loader import (
    TokenDocumentLoader,
    load_document,
    load_table,
)
from chuk_mcp_design_tokens.storage.writer import ArtifactWriter, table_artifact

__all__ = [
    "ArtifactWriter",
    "TokenDocumentLoader",
    "load_document",
    "load_table",
    "table_artifact",
]
