"""Metadata header policies for structured-document exports.

Text extractors prefix some formats with a sentinel header (for example
``[DOCX Document: report.docx]`` followed by a blank line). The chunker keeps
that header at the front of the first chunk so the metadata travels with the
opening content.
"""

import re
from dataclasses import dataclass

from ..core.source import SourceType, classify_source


@dataclass(frozen=True)
class HeaderPolicy:
    """How to detect and place a leading metadata header.

    Attributes:
        pattern: Regex anchored at the start of the text
        min_first_chunk_size: Lower bound on the body characters kept
            in the first chunk, whatever the header length
    """

    pattern: re.Pattern[str]
    min_first_chunk_size: int = 200

    def match(self, text: str) -> str | None:
        found = self.pattern.match(text)
        return found.group(0) if found else None


_OFFICE_PATTERN = re.compile(r"\[(Excel|PowerPoint) Document:.*?\]\s*\n\n")

HEADER_POLICIES: dict[SourceType, HeaderPolicy] = {
    # No DOTALL: the PDF sentinel must sit on a single line.
    SourceType.PDF: HeaderPolicy(re.compile(r"PDF Document.*?Content:")),
    SourceType.DOCX: HeaderPolicy(re.compile(r"\[DOCX Document:.*?\]\s*\n\n")),
    SourceType.XLSX: HeaderPolicy(_OFFICE_PATTERN),
    SourceType.PPTX: HeaderPolicy(_OFFICE_PATTERN),
}


def policy_for(file_name: str) -> HeaderPolicy | None:
    """Look up the header policy for a file, ``None`` for plain text."""
    return HEADER_POLICIES.get(classify_source(file_name))
