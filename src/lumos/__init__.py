"""
Lumos Documents - document ingestion core of the Lumos chat application.

Turns text extracted from uploaded files into overlapping, metadata-tagged
chunks, indexes them per document and answers similarity queries.
"""

__version__ = "0.1.0"

# Core entities
from .core import (
    Chunk,
    ChunkMetadata,
    Document,
    DocumentInfo,
    SearchResult,
    SourceType,
    classify_source,
)

# Chunking
from .chunker import (
    BaseChunker,
    ChunkerFactory,
    HeaderPolicy,
    ParagraphChunker,
    chars_to_approx_word_count,
)

# Processing
from .processor import (
    create_document_summary,
    generate_document_id,
    get_document_info,
    process_document,
)

# Embedding and storage
from .embedder import BaseEmbedder, EmbedderFactory, MockEmbedder, OpenAIEmbedder
from .store import BaseDocumentStore, InMemoryDocumentStore
from .manager import DocumentManager

# Configuration
from .config import ComponentConfig, LumosConfig, Settings, build_document_manager, load_settings

__all__ = [
    "__version__",
    # Core
    "Chunk",
    "ChunkMetadata",
    "Document",
    "DocumentInfo",
    "SearchResult",
    "SourceType",
    "classify_source",
    # Chunker
    "BaseChunker",
    "ParagraphChunker",
    "ChunkerFactory",
    "HeaderPolicy",
    "chars_to_approx_word_count",
    # Processor
    "generate_document_id",
    "process_document",
    "create_document_summary",
    "get_document_info",
    # Embedder
    "BaseEmbedder",
    "MockEmbedder",
    "OpenAIEmbedder",
    "EmbedderFactory",
    # Store
    "BaseDocumentStore",
    "InMemoryDocumentStore",
    # Manager
    "DocumentManager",
    # Config
    "ComponentConfig",
    "LumosConfig",
    "Settings",
    "load_settings",
    "build_document_manager",
]
