"""Core data entities for Lumos."""

from .chunk import Chunk, ChunkMetadata
from .document import Document, DocumentInfo, estimate_tokens
from .search_result import SearchResult
from .source import SourceType, classify_source

__all__ = [
    "Chunk",
    "ChunkMetadata",
    "Document",
    "DocumentInfo",
    "SearchResult",
    "SourceType",
    "classify_source",
    "estimate_tokens",
]
