"""Document processing: ids, chunking and document summaries."""

from .document_processor import (
    DEFAULT_CHUNK_OVERLAP,
    DEFAULT_CHUNK_SIZE,
    create_document_summary,
    generate_document_id,
    get_document_info,
    process_document,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_CHUNK_OVERLAP",
    "generate_document_id",
    "process_document",
    "create_document_summary",
    "get_document_info",
]
