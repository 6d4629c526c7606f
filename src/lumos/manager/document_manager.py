"""Document manager: ingest, describe, query and remove documents."""

from pathlib import Path

from loguru import logger

from ..chunker.base import BaseChunker
from ..chunker.providers.paragraph import ParagraphChunker
from ..core.document import DocumentInfo
from ..core.search_result import SearchResult
from ..errors import ConfigurationError, DocumentNotFoundError
from ..processor.document_processor import (
    create_document_summary,
    get_document_info,
    process_document,
)
from ..store.base import BaseDocumentStore
from ..utils.performance import timer


class DocumentManager:
    """Front door for document ingestion and retrieval.

    Combines the processor (chunking), a document store (indexing and
    search) and an optional directory of ``DocumentInfo`` JSON files.

    Example:
        >>> manager = DocumentManager(InMemoryDocumentStore(MockEmbedder()))
        >>> info = manager.add_document(text, "report.pdf")
        >>> hits = manager.query_document(info.id, "revenue", top_k=3)
    """

    def __init__(
        self,
        store: BaseDocumentStore,
        documents_dir: str | Path | None = None,
        chunker: BaseChunker | None = None,
    ):
        self.store = store
        self.documents_dir = Path(documents_dir) if documents_dir else None
        self.chunker = chunker or ParagraphChunker()

        if self.documents_dir:
            self.documents_dir.mkdir(parents=True, exist_ok=True)

    def add_document(self, content: str, file_name: str, persist: bool = False) -> DocumentInfo:
        """Chunk, describe and index a file's extracted text.

        Args:
            content: Extracted text of the file
            file_name: Name of the file
            persist: Also write the info file and the store entry to disk

        Returns:
            Info describing the indexed document

        Raises:
            ConfigurationError: If ``persist`` is set but the store has no
                persistence directory; nothing is indexed or written
        """
        if persist and getattr(self.store, "persist_dir", None) is None:
            raise ConfigurationError(
                f"Cannot persist '{file_name}': the document store has no persist_dir",
                details={"file_name": file_name},
            )

        with timer(f"Adding document '{file_name}'"):
            document = process_document(content, file_name, chunker=self.chunker)
            info = get_document_info(document)

            self.store.create(document, persist=persist)

            # Info file only once the store entry exists.
            if persist:
                self._save_info(info)

        return info

    def get_document_info(self, document_id: str) -> DocumentInfo | None:
        if self.documents_dir is None:
            return None

        path = self._info_path(document_id)
        if not path.exists():
            logger.debug(f"Document info for {document_id} not found")
            return None
        return DocumentInfo.model_validate_json(path.read_text(encoding="utf-8"))

    def list_documents(self) -> list[DocumentInfo]:
        """All persisted document infos, ordered by creation time."""
        if self.documents_dir is None:
            return []

        infos = [
            DocumentInfo.model_validate_json(path.read_text(encoding="utf-8"))
            for path in sorted(self.documents_dir.glob("*.json"))
        ]
        return sorted(infos, key=lambda info: info.created_at)

    def delete_document(self, document_id: str) -> bool:
        self.store.delete(document_id)
        if self.documents_dir is not None:
            self._info_path(document_id).unlink(missing_ok=True)
        logger.info(f"Deleted document {document_id}")
        return True

    def query_document(self, document_id: str, query: str, top_k: int = 5) -> list[SearchResult]:
        """Return the chunks of a document most relevant to a query.

        Raises:
            DocumentNotFoundError: If the document is not indexed
        """
        return self.store.search(document_id, query, top_k=top_k)

    def summarize(self, document_id: str) -> str:
        document = self.store.get(document_id)
        if document is None:
            raise DocumentNotFoundError(document_id)
        return create_document_summary(document)

    def _save_info(self, info: DocumentInfo) -> None:
        if self.documents_dir is None:
            logger.warning(f"No documents_dir configured, info for {info.id} not saved")
            return
        path = self._info_path(info.id)
        path.write_text(info.model_dump_json(indent=2), encoding="utf-8")
        logger.info(f"Document info saved to {path}")

    def _info_path(self, document_id: str) -> Path:
        return self.documents_dir / f"{document_id}.json"
