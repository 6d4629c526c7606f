"""Document entities: the ingested unit of text and its summary info."""

import math
from datetime import datetime, timezone

from pydantic import BaseModel, Field, model_validator

from .chunk import Chunk


class Document(BaseModel):
    """An ingested file, identified by a content+filename hash.

    Documents are immutable after creation. Each chunk belongs to exactly
    one document and chunk indices run ``0..n-1`` in emission order.

    Attributes:
        id: Document identifier (see ``generate_document_id``)
        file_name: Name of the originating file
        chunks: Ordered chunks of the document's text
    """

    id: str
    file_name: str
    chunks: tuple[Chunk, ...] = Field(default_factory=tuple)

    model_config = {
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check_chunks(self) -> "Document":
        for index, chunk in enumerate(self.chunks):
            if chunk.metadata.chunk_id != index:
                raise ValueError(
                    f"Chunk indices must be contiguous from 0, got "
                    f"{chunk.metadata.chunk_id} at position {index}"
                )
            if chunk.metadata.document_id != self.id:
                raise ValueError(
                    f"Chunk {index} belongs to document {chunk.metadata.document_id}, "
                    f"not {self.id}"
                )
        return self

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    @property
    def texts(self) -> list[str]:
        return [chunk.page_content for chunk in self.chunks]


class DocumentInfo(BaseModel):
    """Structured description of an ingested document.

    Attributes:
        id: Document identifier
        file_name: Name of the originating file
        total_chunks: Number of chunks
        total_tokens: Rough token estimate (about four characters per token)
        created_at: When the info was built (UTC)
    """

    id: str
    file_name: str
    total_chunks: int = Field(..., ge=0)
    total_tokens: int = Field(..., ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def estimate_tokens(text: str) -> int:
    """Rough token estimate used for document info."""
    return math.ceil(len(text) / 4)
