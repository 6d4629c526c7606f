"""Base document store interface."""

from abc import ABC, abstractmethod

from ..core.document import Document
from ..core.search_result import SearchResult


class BaseDocumentStore(ABC):
    """Abstract base class for per-document similarity indexes.

    A store owns one index per document id. Its lifecycle is explicit:
    entries are created, fetched and deleted through the store instance,
    so independent stores never share state.
    """

    @abstractmethod
    def create(self, document: Document, persist: bool = False) -> Document:
        """Index a document, replacing any entry with the same id.

        Args:
            document: Chunked document to index
            persist: Also write the document to the persistence directory;
                requires a store configured for persistence

        Returns:
            The indexed copy, whose chunks carry their embeddings
        """
        pass

    @abstractmethod
    def get(self, document_id: str) -> Document | None:
        """Fetch an indexed document, loading it from disk if needed.

        Returns:
            The document, or None if the id is unknown
        """
        pass

    @abstractmethod
    def search(self, document_id: str, query: str, top_k: int = 5) -> list[SearchResult]:
        """Find the chunks of one document most similar to a query.

        Raises:
            DocumentNotFoundError: If the document is not indexed
        """
        pass

    @abstractmethod
    def delete(self, document_id: str) -> bool:
        """Remove a document from memory and from disk."""
        pass

    def has(self, document_id: str) -> bool:
        return self.get(document_id) is not None
