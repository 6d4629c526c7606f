"""Provider implementations for embedders."""

from .mock import MockEmbedder
from .openai import OpenAIEmbedder

__all__ = ["MockEmbedder", "OpenAIEmbedder"]
