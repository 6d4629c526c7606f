"""Document management on top of the processor and store."""

from .document_manager import DocumentManager

__all__ = ["DocumentManager"]
