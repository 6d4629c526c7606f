"""Tests for metadata header preservation in the first chunk."""

import pytest

from lumos.chunker import HEADER_POLICIES, ParagraphChunker, policy_for
from lumos.core import SourceType


@pytest.fixture
def body(make_paragraph) -> str:
    return "\n\n".join(make_paragraph(i) for i in range(30))


class TestPolicyLookup:
    """Tests for the source type -> header policy table."""

    def test_plain_text_has_no_policy(self):
        assert policy_for("notes.txt") is None
        assert policy_for("data.csv") is None

    def test_lookup_is_case_insensitive(self):
        assert policy_for("REPORT.PDF") is HEADER_POLICIES[SourceType.PDF]

    def test_office_formats_share_pattern(self):
        assert HEADER_POLICIES[SourceType.XLSX].pattern is HEADER_POLICIES[SourceType.PPTX].pattern

    @pytest.mark.parametrize(
        ("file_name", "text", "expected"),
        [
            ("a.pdf", "PDF Document with 2 pages. Content:\n\nbody", "PDF Document with 2 pages. Content:"),
            ("a.docx", "[DOCX Document: a.docx]\n\nbody", "[DOCX Document: a.docx]\n\n"),
            ("a.xlsx", "[Excel Document: a.xlsx]  \n\nbody", "[Excel Document: a.xlsx]  \n\n"),
            ("a.pptx", "[PowerPoint Document: a.pptx]\n\nbody", "[PowerPoint Document: a.pptx]\n\n"),
        ],
    )
    def test_sentinel_match(self, file_name, text, expected):
        assert policy_for(file_name).match(text) == expected

    def test_sentinel_must_lead_the_text(self):
        policy = policy_for("a.pdf")
        assert policy.match("Intro\nPDF Document with 2 pages. Content:") is None

    def test_pdf_sentinel_must_be_on_one_line(self):
        assert policy_for("a.pdf").match("PDF Document\nContent:\n\nbody") is None

    def test_docx_sentinel_needs_blank_line(self):
        assert policy_for("a.docx").match("[DOCX Document: a.docx] body") is None


class TestHeaderPreservation:
    """The header is prepended verbatim to the first chunk."""

    def test_pdf_first_chunk_starts_with_sentinel(self, paragraph_chunker, pdf_export_text):
        chunks = paragraph_chunker.split_text(pdf_export_text, "report.pdf")

        assert chunks[0].startswith("PDF Document with 3 pages. Content:")

    def test_pdf_body_chunked_after_header(self, paragraph_chunker, pdf_export_text, body):
        header = "PDF Document with 3 pages. Content:"
        body_chunks = paragraph_chunker.split_text(body, "notes.txt")

        chunks = paragraph_chunker.split_text(pdf_export_text, "report.pdf")

        # The body's first chunk fits next to a short header, so nothing moves.
        assert chunks[0] == header + body_chunks[0]
        assert chunks[1:] == body_chunks[1:]

    def test_long_header_truncates_first_chunk(self, paragraph_chunker, body):
        header = "[DOCX Document: " + "x" * 300 + "]\n\n"
        body_chunks = paragraph_chunker.split_text(body, "notes.txt")

        chunks = paragraph_chunker.split_text(header + body, "minutes.docx")

        first_size = 1000 - len(header)
        assert chunks[0] == header + body_chunks[0][:first_size]
        assert chunks[1] == body_chunks[0][first_size:]
        assert chunks[2:] == body_chunks[1:]
        assert len(chunks[0]) == 1000

    def test_first_chunk_keeps_minimum_body(self, paragraph_chunker, body):
        header = "[DOCX Document: " + "x" * 900 + "]\n\n"
        body_chunks = paragraph_chunker.split_text(body, "notes.txt")

        chunks = paragraph_chunker.split_text(header + body, "minutes.docx")

        assert chunks[0] == header + body_chunks[0][:200]
        assert chunks[1] == body_chunks[0][200:]

    def test_excel_header(self, paragraph_chunker, body):
        header = "[Excel Document: sales.xlsx]\n\n"

        chunks = paragraph_chunker.split_text(header + body, "sales.xlsx")

        assert chunks[0].startswith(header + "para000")

    def test_keyword_in_file_name_selects_policy(self, paragraph_chunker, body):
        header = "[PowerPoint Document: deck]\n\n"

        chunks = paragraph_chunker.split_text(header + body, "PowerPoint export")

        assert chunks[0].startswith(header + "para000")

    def test_unmatched_sentinel_falls_through(self, paragraph_chunker, body):
        text = "PDF Document\nwith 3 pages. Content:\n\n" + body

        assert paragraph_chunker.split_text(text, "report.pdf") == paragraph_chunker.split_text(text, "notes.txt")

    def test_header_ignored_for_plain_text(self, paragraph_chunker, docx_export_text):
        chunks = paragraph_chunker.split_text(docx_export_text, "notes.txt")

        # Uniform chunking treats the sentinel as an ordinary paragraph.
        assert chunks[0].startswith("[DOCX Document: minutes.docx] para000")
