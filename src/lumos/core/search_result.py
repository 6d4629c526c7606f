"""A chunk matched by a similarity query."""

from pydantic import BaseModel, Field

from .chunk import Chunk


class SearchResult(BaseModel):
    """One hit from ``search``: a chunk and its cosine score mapped to [0, 1]."""

    chunk: Chunk
    score: float = Field(..., ge=0.0, le=1.0)

    model_config = {
        "frozen": True,
    }

    def __lt__(self, other: "SearchResult") -> bool:
        # Best match first under sorted().
        return self.score > other.score
