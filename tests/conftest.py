"""Pytest configuration and global fixtures for Lumos tests."""

from pathlib import Path

import pytest

from lumos.chunker import ParagraphChunker
from lumos.embedder import MockEmbedder
from lumos.manager import DocumentManager
from lumos.store import InMemoryDocumentStore

# Import shared fixtures
from tests.fixtures.common import (  # noqa: F401
    docx_export_text,
    long_plain_text,
    make_paragraph,
    pdf_export_text,
)


@pytest.fixture
def mock_embedder():
    return MockEmbedder(dimension=16)


@pytest.fixture
def paragraph_chunker():
    return ParagraphChunker(chunk_size=1000, chunk_overlap=200)


@pytest.fixture
def memory_store(mock_embedder):
    store = InMemoryDocumentStore(mock_embedder)
    yield store
    store.clear()


@pytest.fixture
def persistent_store(mock_embedder, tmp_path):
    store = InMemoryDocumentStore(mock_embedder, persist_dir=tmp_path / "vector-stores")
    yield store
    store.clear()


@pytest.fixture
def document_manager(persistent_store, tmp_path):
    return DocumentManager(
        persistent_store,
        documents_dir=tmp_path / "documents",
        chunker=ParagraphChunker(chunk_size=300, chunk_overlap=50),
    )

# ==================== Pytest Configuration ====================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "smoke: Smoke tests")

def pytest_collection_modifyitems(config, items):
    for item in items:
        rel_path = Path(item.fspath).relative_to(Path(__file__).parent)
        if "unit" in rel_path.parts:
            item.add_marker(pytest.mark.unit)
        elif "smoke" in rel_path.parts:
            item.add_marker(pytest.mark.smoke)
