"""Chunker module for text splitting.

This module provides the paragraph chunker, the metadata header policies
it applies to structured-document exports, and a factory for creating
chunkers by type.
"""

from .base import BaseChunker
from .factory import ChunkerFactory
from .headers import HEADER_POLICIES, HeaderPolicy, policy_for
from .providers.paragraph import APPROX_CHARS_PER_WORD, ParagraphChunker, chars_to_approx_word_count

__all__ = [
    "BaseChunker",
    "ParagraphChunker",
    "ChunkerFactory",
    "HeaderPolicy",
    "HEADER_POLICIES",
    "policy_for",
    "chars_to_approx_word_count",
    "APPROX_CHARS_PER_WORD",
]
