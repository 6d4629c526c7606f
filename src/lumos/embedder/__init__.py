"""Embedder module for vector generation.

This module provides embedding functionality with a deterministic mock,
an OpenAI-compatible REST embedder and a factory for creating embedders.
"""

from .base import BaseEmbedder
from .factory import EmbedderFactory
from .providers.mock import MockEmbedder
from .providers.openai import OpenAIEmbedder

__all__ = ["BaseEmbedder", "MockEmbedder", "OpenAIEmbedder", "EmbedderFactory"]
