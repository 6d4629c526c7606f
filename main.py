#!/usr/bin/env python3
"""
Lumos Documents Demo Application

Ingests a sample PDF export, shows how it was chunked and runs a
similarity query against it with the in-memory store.
"""

import logging
import sys

# Setup basic logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger("main")

from lumos import (  # noqa: E402
    DocumentManager,
    InMemoryDocumentStore,
    MockEmbedder,
    ParagraphChunker,
)
from lumos.config import configure_logging, load_settings  # noqa: E402


def create_sample_text() -> str:
    """Text shaped like the output of the PDF extractor."""
    paragraphs = [
        "Quarterly revenue grew 12% year over year, driven by subscription renewals "
        "and a strong quarter in the enterprise segment.",
        "Operating costs were flat. Hiring slowed in the second half while cloud "
        "spend rose with the launch of the analytics product.",
        "The board approved a buyback programme and reaffirmed guidance for the "
        "full year, citing a healthy pipeline and improving retention.",
        "Risks include currency swings, a slower enterprise sales cycle and the "
        "integration of the recently acquired data-visualisation team.",
    ]
    return "PDF Document with 4 pages. Content:\n\n" + "\n\n".join(paragraphs * 3)


def main():
    settings = load_settings()
    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting Lumos Documents Demo")

    store = InMemoryDocumentStore(MockEmbedder(dimension=64))
    manager = DocumentManager(store, chunker=ParagraphChunker(chunk_size=400, chunk_overlap=60))

    # 1. Ingest
    logger.info("--- Phase 1: Ingestion ---")
    info = manager.add_document(create_sample_text(), "quarterly-report.pdf")
    logger.info(f"Indexed {info.file_name} as {info.id}: {info.total_chunks} chunks, ~{info.total_tokens} tokens")
    logger.info(manager.summarize(info.id))

    # 2. Query
    logger.info("--- Phase 2: Retrieval ---")
    query = "Operating costs were flat."
    logger.info(f"Query: '{query}'")

    for i, result in enumerate(manager.query_document(info.id, query, top_k=3), 1):
        preview = result.chunk.page_content.replace("\n", " ")[:100]
        logger.info(f"[{i}] chunk {result.chunk.metadata.chunk_id} score={result.score:.3f}: {preview}...")

    manager.delete_document(info.id)
    logger.info("Demo complete!")


if __name__ == "__main__":
    main()
