"""Turn extracted file text into chunked, metadata-tagged documents."""

import hashlib

from loguru import logger

from ..chunker.base import BaseChunker
from ..chunker.providers.paragraph import ParagraphChunker
from ..core.chunk import Chunk, ChunkMetadata
from ..core.document import Document, DocumentInfo, estimate_tokens
from ..core.source import classify_source

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_CHUNK_OVERLAP = 200

# Only the head of the content feeds the id, so identical re-uploads collide.
ID_CONTENT_PREFIX = 1000

SUMMARY_CHUNKS = 3
SUMMARY_CHARS_PER_CHUNK = 200


def generate_document_id(content: str, file_name: str) -> str:
    """Derive a deterministic document id from file name and content head.

    Args:
        content: Extracted text of the file
        file_name: Name of the file

    Returns:
        Hex MD5 digest of ``"{file_name}-{content[:1000]}"``
    """
    key = f"{file_name}-{content[:ID_CONTENT_PREFIX]}"
    return hashlib.md5(key.encode("utf-8", errors="surrogatepass")).hexdigest()


def process_document(
    content: str,
    file_name: str,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    chunk_overlap: int = DEFAULT_CHUNK_OVERLAP,
    chunker: BaseChunker | None = None,
) -> Document:
    """Chunk a file's text and wrap each piece in a tagged Chunk.

    Args:
        content: Extracted text of the file
        file_name: Name of the file (selects source tag and header handling)
        chunk_size: Target chunk size, ignored when ``chunker`` is given
        chunk_overlap: Overlap budget, ignored when ``chunker`` is given
        chunker: Chunker to use instead of a default ParagraphChunker

    Returns:
        The immutable Document with chunks indexed from 0
    """
    document_id = generate_document_id(content, file_name)
    chunker = chunker or ParagraphChunker(chunk_size=chunk_size, chunk_overlap=chunk_overlap)
    source = classify_source(file_name)

    texts = chunker.split_text(content, file_name)
    chunks = tuple(
        Chunk(
            page_content=text,
            metadata=ChunkMetadata(
                source=source,
                document_id=document_id,
                chunk_id=index,
                file_name=file_name,
            ),
        )
        for index, text in enumerate(texts)
    )

    logger.info(f"Processed '{file_name}' ({source}) into {len(chunks)} chunks, id={document_id}")
    return Document(id=document_id, file_name=file_name, chunks=chunks)


def create_document_summary(document: Document) -> str:
    """Preview of the opening chunks of a document."""
    preview = "\n...\n".join(
        text[:SUMMARY_CHARS_PER_CHUNK] for text in document.texts[:SUMMARY_CHUNKS]
    )
    return (
        f"Document Summary (preview):\n{preview}\n...\n"
        f"(Document contains {document.total_chunks} chunks of content in total)"
    )


def get_document_info(document: Document) -> DocumentInfo:
    return DocumentInfo(
        id=document.id,
        file_name=document.file_name,
        total_chunks=document.total_chunks,
        total_tokens=sum(estimate_tokens(text) for text in document.texts),
    )
