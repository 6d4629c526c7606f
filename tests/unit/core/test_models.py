"""Tests for the core data model."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from lumos.core import (
    Chunk,
    ChunkMetadata,
    Document,
    DocumentInfo,
    SearchResult,
    SourceType,
    classify_source,
    estimate_tokens,
)


def make_chunk(index: int, document_id: str = "doc-1", text: str | None = None) -> Chunk:
    return Chunk(
        page_content=text if text is not None else f"chunk {index}",
        metadata=ChunkMetadata(
            source=SourceType.TEXT,
            document_id=document_id,
            chunk_id=index,
            file_name="notes.txt",
        ),
    )


class TestClassifySource:
    """Tests for file name -> source type classification."""

    @pytest.mark.parametrize(
        ("file_name", "expected"),
        [
            ("report.pdf", SourceType.PDF),
            ("REPORT.PDF", SourceType.PDF),
            ("minutes.docx", SourceType.DOCX),
            ("Word export.doc", SourceType.DOCX),
            ("sales.xlsx", SourceType.XLSX),
            ("excel-dump.csv", SourceType.XLSX),
            ("deck.pptx", SourceType.PPTX),
            ("powerpoint notes", SourceType.PPTX),
            ("notes.txt", SourceType.TEXT),
            ("", SourceType.TEXT),
        ],
    )
    def test_classification(self, file_name, expected):
        assert classify_source(file_name) == expected

    def test_rules_checked_in_order(self):
        # A PDF whose name mentions Word is still a PDF.
        assert classify_source("word-template.pdf") == SourceType.PDF
        assert classify_source("wordy excel.xlsx") == SourceType.DOCX

    def test_source_type_is_string(self):
        assert SourceType.PDF == "pdf"
        assert str(SourceType.PPTX) == "pptx"


class TestChunk:

    def test_content_kept_verbatim(self):
        chunk = make_chunk(0, text="  padded\n\n")
        assert chunk.page_content == "  padded\n\n"

    def test_empty_content_allowed(self):
        assert make_chunk(0, text="").page_content == ""

    def test_negative_index_rejected(self):
        with pytest.raises(ValidationError):
            ChunkMetadata(source="pdf", document_id="d", chunk_id=-1, file_name="a.pdf")

    def test_source_coerced_from_string(self):
        metadata = ChunkMetadata(source="docx", document_id="d", chunk_id=0, file_name="a.docx")
        assert metadata.source is SourceType.DOCX


class TestDocument:

    def test_valid_document(self):
        document = Document(id="doc-1", file_name="notes.txt", chunks=[make_chunk(i) for i in range(3)])

        assert document.total_chunks == 3
        assert document.texts == ["chunk 0", "chunk 1", "chunk 2"]
        assert isinstance(document.chunks, tuple)

    def test_indices_must_be_contiguous(self):
        with pytest.raises(ValidationError, match="contiguous"):
            Document(id="doc-1", file_name="notes.txt", chunks=[make_chunk(0), make_chunk(2)])

    def test_indices_must_start_at_zero(self):
        with pytest.raises(ValidationError, match="contiguous"):
            Document(id="doc-1", file_name="notes.txt", chunks=[make_chunk(1)])

    def test_chunks_must_belong_to_document(self):
        with pytest.raises(ValidationError, match="belongs to document other"):
            Document(id="doc-1", file_name="notes.txt", chunks=[make_chunk(0, document_id="other")])

    def test_document_is_immutable(self):
        document = Document(id="doc-1", file_name="notes.txt", chunks=[make_chunk(0)])
        with pytest.raises(ValidationError):
            document.id = "doc-2"


class TestDocumentInfo:

    def test_defaults_created_at_to_utc_now(self):
        before = datetime.now(timezone.utc)
        info = DocumentInfo(id="d", file_name="a.pdf", total_chunks=2, total_tokens=10)

        assert info.created_at >= before
        assert info.created_at.tzinfo is not None

    def test_json_round_trip(self):
        info = DocumentInfo(id="d", file_name="a.pdf", total_chunks=2, total_tokens=10)
        assert DocumentInfo.model_validate_json(info.model_dump_json()) == info

    def test_estimate_tokens(self):
        assert estimate_tokens("") == 0
        assert estimate_tokens("abcd") == 1
        assert estimate_tokens("abcde") == 2


class TestSearchResult:

    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            SearchResult(chunk=make_chunk(0), score=1.5)
        with pytest.raises(ValidationError):
            SearchResult(chunk=make_chunk(0), score=-0.1)

    def test_sorts_by_score_descending(self):
        results = [
            SearchResult(chunk=make_chunk(0), score=0.2),
            SearchResult(chunk=make_chunk(1), score=0.9),
            SearchResult(chunk=make_chunk(2), score=0.5),
        ]
        assert [r.score for r in sorted(results)] == [0.9, 0.5, 0.2]
