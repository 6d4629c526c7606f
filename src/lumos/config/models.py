"""Configuration models for Lumos components.

All components are configured via a type string and optional parameters.
"""

from typing import Any

from pydantic import BaseModel, Field


class ComponentConfig(BaseModel):
    """Configuration for a single component.

    Attributes:
        type: Component type identifier (e.g., "paragraph", "openai")
        params: Component-specific parameters as a dictionary
    """

    type: str
    params: dict[str, Any] = Field(default_factory=dict)


class LumosConfig(BaseModel):
    """Wiring of the ingestion pipeline.

    Attributes:
        chunker: Chunker component configuration
        embedder: Embedder component configuration
        persist_dir: Directory for persisted store entries (None: memory only)
        documents_dir: Directory for document info files (None: not saved)
    """

    chunker: ComponentConfig = Field(default_factory=lambda: ComponentConfig(type="paragraph"))
    embedder: ComponentConfig = Field(default_factory=lambda: ComponentConfig(type="mock"))
    persist_dir: str | None = None
    documents_dir: str | None = None
