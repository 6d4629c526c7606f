"""Paragraph-accumulating chunker with word-based overlap.

Text is split on blank-line paragraph boundaries and paragraphs are packed
into a running buffer until the target size is reached. Consecutive chunks
share the trailing words of the previous chunk so that context survives
chunk boundaries.
"""

import re

from loguru import logger

from ..base import BaseChunker
from ..headers import policy_for

APPROX_CHARS_PER_WORD = 10

_PARAGRAPH_BREAK = re.compile(r"\n\s*\n")
_WHITESPACE = re.compile(r"\s+")


def chars_to_approx_word_count(chars: int, chars_per_word: int = APPROX_CHARS_PER_WORD) -> int:
    """Convert a character budget into an approximate whole-word count.

    Args:
        chars: Character budget (e.g. the chunk overlap)
        chars_per_word: Assumed average word length

    Returns:
        Number of whole words, rounded down
    """
    return chars // chars_per_word


class ParagraphChunker(BaseChunker):
    """Packs paragraphs into chunks of roughly ``chunk_size`` characters.

    A single paragraph longer than ``chunk_size`` is never sub-split, so a
    chunk can exceed the target size. Overlap is measured in characters but
    retained as whole trailing words, so the true overlap varies with the
    average word length of the text.

    Attributes:
        chunk_size: Target characters per chunk
        chunk_overlap: Overlap budget in characters
        chars_per_word: Average word length used to convert the overlap
    """

    def __init__(
        self,
        chunk_size: int = 1000,
        chunk_overlap: int = 200,
        chars_per_word: int = APPROX_CHARS_PER_WORD,
    ):
        if chunk_size < 1:
            logger.warning(f"chunk_size={chunk_size} is not positive, clamping to 1")
            chunk_size = 1
        if chunk_overlap < 0:
            logger.warning(f"chunk_overlap={chunk_overlap} is negative, clamping to 0")
            chunk_overlap = 0
        if chunk_overlap >= chunk_size:
            logger.warning(
                f"chunk_overlap={chunk_overlap} >= chunk_size={chunk_size}, "
                f"clamping to {chunk_size - 1}"
            )
            chunk_overlap = chunk_size - 1
        if chars_per_word < 1:
            logger.warning(f"chars_per_word={chars_per_word} is not positive, clamping to 1")
            chars_per_word = 1

        self.chunk_size = chunk_size
        self.chunk_overlap = chunk_overlap
        self.chars_per_word = chars_per_word

    @property
    def overlap_words(self) -> int:
        return chars_to_approx_word_count(self.chunk_overlap, self.chars_per_word)

    def split_text(self, text: str, file_name: str = "") -> list[str]:
        if len(text) <= self.chunk_size:
            return [text]

        policy = policy_for(file_name)
        header = policy.match(text) if policy else None
        if header is None:
            chunks = self._chunk(text)
        else:
            chunks = self._chunk_with_header(text, header, policy.min_first_chunk_size)

        logger.debug(
            f"Split {len(text)} chars from '{file_name}' into {len(chunks)} chunks "
            f"(header={'yes' if header else 'no'})"
        )
        return chunks

    def _chunk_with_header(self, text: str, header: str, min_first_size: int) -> list[str]:
        """Chunk the body and put the header in front of the first chunk."""
        body_chunks = self._chunk(text[len(header):].strip())

        first_size = max(self.chunk_size - len(header), min_first_size)
        first_body = body_chunks[0]
        chunks = [header + first_body[:first_size]]

        tail = first_body[first_size:]
        if tail:
            chunks.append(tail)
        chunks.extend(body_chunks[1:])
        return chunks

    def _chunk(self, text: str) -> list[str]:
        """Core paragraph accumulation."""
        if len(text) <= self.chunk_size:
            return [text]

        chunks: list[str] = []
        buffer = ""

        for paragraph in _PARAGRAPH_BREAK.split(text):
            if buffer and len(buffer) + len(paragraph) > self.chunk_size:
                chunks.append(buffer)
                buffer = self._overlap_tail(buffer)

            if buffer and not buffer[-1].isspace():
                buffer += " "
            buffer += paragraph

            if len(buffer) >= self.chunk_size:
                chunks.append(buffer)
                buffer = self._overlap_tail(buffer)

        if buffer:
            chunks.append(buffer)

        # Whitespace-only text has no paragraphs; keep the empty-document shape.
        return chunks or [""]

    def _overlap_tail(self, chunk: str) -> str:
        """Trailing words of a flushed chunk that seed the next one."""
        word_count = self.overlap_words
        if word_count == 0:
            return ""
        words = _WHITESPACE.split(chunk)
        if len(words) <= self.chunk_overlap / self.chars_per_word:
            return ""
        return " ".join(words[-word_count:])
