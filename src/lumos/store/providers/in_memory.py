"""In-memory document store with optional JSON persistence."""

import json
import threading
from pathlib import Path

from loguru import logger

from ...core.document import Document
from ...core.search_result import SearchResult
from ...embedder.base import BaseEmbedder
from ...errors import DocumentNotFoundError, DocumentStoreError
from ...utils.similarity import cosine_similarity
from ..base import BaseDocumentStore


class InMemoryDocumentStore(BaseDocumentStore):
    """Keeps embedded documents in process memory.

    Indexed documents are copies of the input whose chunks carry their
    ``embedding``. Persistence writes only the chunk text and metadata;
    embeddings are recomputed with the store's embedder when a document is
    loaded back from disk.

    Attributes:
        embedder: Embedder used for chunks and queries
        persist_dir: Directory for ``{document_id}.json`` files, or None
    """

    def __init__(self, embedder: BaseEmbedder, persist_dir: str | Path | None = None):
        self.embedder = embedder
        self.persist_dir = Path(persist_dir) if persist_dir else None
        self._documents: dict[str, Document] = {}
        self._lock = threading.RLock()

        if self.persist_dir:
            self.persist_dir.mkdir(parents=True, exist_ok=True)
            logger.info(f"Initialized InMemoryDocumentStore (persist_dir={self.persist_dir})")
        else:
            logger.info("Initialized InMemoryDocumentStore")

    def create(self, document: Document, persist: bool = False) -> Document:
        """Embed and index a document.

        Raises:
            DocumentStoreError: If ``persist`` is set on a memory-only store;
                nothing is indexed in that case
        """
        if persist and self.persist_dir is None:
            raise DocumentStoreError(
                "No persist_dir configured for this store",
                details={"document_id": document.id},
            )

        indexed = self._embed_document(document)

        with self._lock:
            self._documents[document.id] = indexed

        logger.info(f"Indexed document {document.id} ({document.total_chunks} chunks)")

        if persist:
            self.persist(document.id)
        return indexed

    def get(self, document_id: str) -> Document | None:
        with self._lock:
            document = self._documents.get(document_id)
        if document is not None:
            return document
        return self.load(document_id)

    def list_ids(self) -> list[str]:
        with self._lock:
            return list(self._documents.keys())

    def count(self) -> int:
        with self._lock:
            return len(self._documents)

    def search(self, document_id: str, query: str, top_k: int = 5) -> list[SearchResult]:
        if top_k < 1:
            raise ValueError("top_k must be positive")

        # One lookup: chunks and their vectors travel together.
        document = self.get(document_id)
        if document is None:
            logger.error(f"Search on unknown document {document_id}")
            raise DocumentNotFoundError(document_id)

        query_vector = self.embedder.embed([query])[0]
        results = [
            SearchResult(chunk=chunk, score=cosine_similarity(query_vector, chunk.embedding))
            for chunk in document.chunks
        ]
        results.sort()

        logger.debug(f"Found {len(results)} results in {document_id}, returning top {top_k}")
        return results[:top_k]

    def persist(self, document_id: str) -> bool:
        """Write a document's chunks to ``{persist_dir}/{document_id}.json``.

        Returns:
            False if the document is not in memory

        Raises:
            DocumentStoreError: If no persistence directory is configured
        """
        with self._lock:
            document = self._documents.get(document_id)
        if document is None:
            logger.error(f"Vector store for document {document_id} not found")
            return False

        path = self._path_for(document_id)
        path.write_text(
            json.dumps({"document": document.model_dump(mode="json", exclude={"chunks": {"__all__": {"embedding"}}})}),
            encoding="utf-8",
        )
        logger.info(f"Vector store for document {document_id} persisted to {path}")
        return True

    def load(self, document_id: str) -> Document | None:
        """Load a persisted document and re-embed its chunks.

        Returns:
            The document, or None if nothing is persisted under the id
        """
        if self.persist_dir is None:
            return None

        path = self._path_for(document_id)
        if not path.exists():
            logger.debug(f"Vector store file for {document_id} not found")
            return None

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
            document = Document.model_validate(data["document"])
        except (ValueError, KeyError) as e:
            logger.error(f"Corrupt vector store file {path}: {e}")
            raise DocumentStoreError(
                f"Failed to load document {document_id}",
                details={"path": str(path)},
                original_error=e,
            ) from e

        return self.create(document)

    def delete(self, document_id: str) -> bool:
        with self._lock:
            self._documents.pop(document_id, None)

        if self.persist_dir is not None:
            self._path_for(document_id).unlink(missing_ok=True)

        logger.info(f"Deleted document {document_id}")
        return True

    def clear(self) -> None:
        """Drop every in-memory entry; persisted files are kept."""
        with self._lock:
            self._documents.clear()

    def _embed_document(self, document: Document) -> Document:
        """Copy of ``document`` whose chunks carry their vectors."""
        if not document.chunks:
            return document
        embeddings = self.embedder.embed(document.texts)
        if len(embeddings) != document.total_chunks:
            raise DocumentStoreError(
                f"Embedder returned {len(embeddings)} vectors for {document.total_chunks} chunks",
                details={"document_id": document.id},
            )
        chunks = tuple(
            chunk.model_copy(update={"embedding": vector})
            for chunk, vector in zip(document.chunks, embeddings)
        )
        return document.model_copy(update={"chunks": chunks})

    def _path_for(self, document_id: str) -> Path:
        if self.persist_dir is None:
            raise DocumentStoreError("No persist_dir configured for this store")
        return self.persist_dir / f"{document_id}.json"
