"""Chunk entity representing a segment of a document."""

from pydantic import BaseModel, Field

from .source import SourceType


class ChunkMetadata(BaseModel):
    """Position and provenance of a chunk.

    Attributes:
        source: Source type tag derived from the file name
        document_id: Id of the owning document
        chunk_id: Zero-based index of the chunk in emission order
        file_name: Name of the originating file
    """

    source: SourceType
    document_id: str
    chunk_id: int = Field(..., ge=0)
    file_name: str


class Chunk(BaseModel):
    """Represents a chunk of text from a document.

    Content is kept verbatim (no whitespace stripping) and may be empty:
    an empty document is represented by a single empty chunk.

    Attributes:
        page_content: The text content of this chunk
        metadata: Position and provenance metadata
        embedding: Optional vector embedding (populated by the store)
    """

    page_content: str
    metadata: ChunkMetadata
    embedding: list[float] | None = None

    model_config = {
        "frozen": False,
    }
