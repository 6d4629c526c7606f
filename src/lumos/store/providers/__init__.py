"""Provider implementations for document stores."""

from .in_memory import InMemoryDocumentStore

__all__ = ["InMemoryDocumentStore"]
