"""Shared test fixtures for all test types."""

import pytest


def build_paragraph(index: int, length: int = 100) -> str:
    """A paragraph of exactly ``length`` characters, tagged with its index.

    Words are separated by single spaces and the paragraph never ends in
    whitespace, so joining paragraphs with a space is unambiguous.
    """
    text = f"para{index:03d}" + " lorem" * (length // 6 + 1)
    text = text[:length]
    if text.endswith(" "):
        text = text[:-1] + "x"
    return text


@pytest.fixture
def make_paragraph():
    """Factory for fixed-length, uniquely tagged paragraphs."""
    return build_paragraph


@pytest.fixture
def long_plain_text() -> str:
    """50 paragraphs of 100 characters separated by blank lines."""
    return "\n\n".join(build_paragraph(i) for i in range(50))


@pytest.fixture
def pdf_export_text() -> str:
    """Text shaped like the output of the PDF extractor."""
    body = "\n\n".join(build_paragraph(i) for i in range(30))
    return "PDF Document with 3 pages. Content:\n\n" + body


@pytest.fixture
def docx_export_text() -> str:
    """Text shaped like the output of the Word extractor."""
    body = "\n\n".join(build_paragraph(i) for i in range(30))
    return "[DOCX Document: minutes.docx]\n\n" + body
