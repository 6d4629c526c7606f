"""Document store module: per-document similarity indexes."""

from .base import BaseDocumentStore
from .providers.in_memory import InMemoryDocumentStore

__all__ = ["BaseDocumentStore", "InMemoryDocumentStore"]
