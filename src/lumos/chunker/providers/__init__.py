"""Provider implementations for chunkers."""

from .paragraph import APPROX_CHARS_PER_WORD, ParagraphChunker, chars_to_approx_word_count

__all__ = ["ParagraphChunker", "chars_to_approx_word_count", "APPROX_CHARS_PER_WORD"]
