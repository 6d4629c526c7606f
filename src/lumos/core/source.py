"""Source type classification derived from file names."""

from enum import StrEnum


class SourceType(StrEnum):
    PDF = "pdf"
    DOCX = "docx"
    XLSX = "xlsx"
    PPTX = "pptx"
    TEXT = "text"


# Checked in order; the first matching rule wins.
_SOURCE_RULES: list[tuple[SourceType, str, str]] = [
    (SourceType.PDF, ".pdf", ""),
    (SourceType.DOCX, ".docx", "word"),
    (SourceType.XLSX, ".xlsx", "excel"),
    (SourceType.PPTX, ".pptx", "powerpoint"),
]


def classify_source(file_name: str) -> SourceType:
    """Classify a file by extension, or by a format keyword in its name.

    Args:
        file_name: Original name of the uploaded file

    Returns:
        The matching SourceType, ``SourceType.TEXT`` when nothing matches
    """
    lower_name = file_name.lower()
    for source, suffix, keyword in _SOURCE_RULES:
        if lower_name.endswith(suffix) or (keyword and keyword in lower_name):
            return source
    return SourceType.TEXT
