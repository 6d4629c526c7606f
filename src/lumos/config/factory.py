"""Component factory for building the pipeline from configuration."""

from loguru import logger

from ..chunker import BaseChunker, ChunkerFactory
from ..embedder import BaseEmbedder, EmbedderFactory
from ..manager import DocumentManager
from ..store import InMemoryDocumentStore
from .models import ComponentConfig, LumosConfig
from .settings import Settings


class ComponentFactory:
    """Unified factory delegating to the specialized factories."""

    @staticmethod
    def create_chunker(config: ComponentConfig) -> BaseChunker:
        logger.info(f"Creating chunker: {config.type}")
        return ChunkerFactory.create(config.type, **config.params)

    @staticmethod
    def create_embedder(config: ComponentConfig) -> BaseEmbedder:
        logger.info(f"Creating embedder: {config.type}")
        return EmbedderFactory.create(config.type, **config.params)

    @staticmethod
    def create_document_manager(config: LumosConfig) -> DocumentManager:
        store = InMemoryDocumentStore(
            ComponentFactory.create_embedder(config.embedder),
            persist_dir=config.persist_dir,
        )
        return DocumentManager(
            store,
            documents_dir=config.documents_dir,
            chunker=ComponentFactory.create_chunker(config.chunker),
        )


def config_from_settings(settings: Settings) -> LumosConfig:
    """Translate environment settings into a pipeline configuration."""
    embedder_params: dict = {}
    if settings.EMBEDDER_TYPE == "openai":
        embedder_params = {
            "api_key": settings.OPENAI_API_KEY,
            "base_url": settings.OPENAI_BASE_URL,
            "model": settings.OPENAI_EMBEDDING_MODEL,
        }

    return LumosConfig(
        chunker=ComponentConfig(
            type="paragraph",
            params={"chunk_size": settings.CHUNK_SIZE, "chunk_overlap": settings.CHUNK_OVERLAP},
        ),
        embedder=ComponentConfig(type=settings.EMBEDDER_TYPE, params=embedder_params),
        persist_dir=str(settings.vector_store_dir),
        documents_dir=str(settings.documents_dir),
    )


def build_document_manager(settings: Settings) -> DocumentManager:
    return ComponentFactory.create_document_manager(config_from_settings(settings))
