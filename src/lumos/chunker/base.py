"""Base chunker interface."""

from abc import ABC, abstractmethod


class BaseChunker(ABC):
    """Abstract base class for text chunking.

    Chunkers split the text extracted from one file into smaller pieces
    suitable for embedding and retrieval. They are pure: no I/O and no
    shared state, so one instance can serve concurrent callers.
    """

    @abstractmethod
    def split_text(self, text: str, file_name: str = "") -> list[str]:
        """Split text into ordered chunk texts.

        Args:
            text: Raw extracted text (may be empty)
            file_name: Name of the source file, used to pick header handling

        Returns:
            Chunk texts in emission order (never empty)
        """
        pass
