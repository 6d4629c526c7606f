"""Look up embedder implementations by type name."""

from typing import Any

from loguru import logger

from ..errors import ConfigurationError
from .base import BaseEmbedder
from .providers.mock import MockEmbedder
from .providers.openai import OpenAIEmbedder


class EmbedderFactory:
    """Registry of embedder classes keyed by the ``EMBEDDER_TYPE`` value."""

    _registry: dict[str, type[BaseEmbedder]] = {
        "mock": MockEmbedder,
        "openai": OpenAIEmbedder,
    }

    @classmethod
    def create(cls, embedder_type: str, **params: Any) -> BaseEmbedder:
        """Instantiate the embedder registered as ``embedder_type``.

        Params are passed through unchanged; they may hold an API key, so
        only the class name is logged.

        Raises:
            ConfigurationError: If nothing is registered under that name
        """
        embedder_class = cls._registry.get(embedder_type)
        if embedder_class is None:
            raise ConfigurationError(
                f"Unknown embedder type: '{embedder_type}'. "
                f"Available types: {', '.join(cls._registry)}"
            )

        logger.debug(f"Creating {embedder_class.__name__}")
        return embedder_class(**params)

    @classmethod
    def register(cls, embedder_type: str, embedder_class: type[BaseEmbedder]):
        if not issubclass(embedder_class, BaseEmbedder):
            raise TypeError(f"{embedder_class.__name__} must be a subclass of BaseEmbedder")

        cls._registry[embedder_type] = embedder_class
        logger.info(f"Registered embedder '{embedder_type}' -> {embedder_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        return list(cls._registry)
