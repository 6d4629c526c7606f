"""Look up chunker implementations by type name."""

from typing import Any

from loguru import logger

from ..errors import ConfigurationError
from .base import BaseChunker
from .providers.paragraph import ParagraphChunker


class ChunkerFactory:
    """Registry of chunker classes keyed by the type string used in config."""

    _registry: dict[str, type[BaseChunker]] = {
        "paragraph": ParagraphChunker,
    }

    @classmethod
    def create(cls, chunker_type: str, **params: Any) -> BaseChunker:
        """Instantiate the chunker registered as ``chunker_type``.

        Raises:
            ConfigurationError: If nothing is registered under that name
        """
        chunker_class = cls._registry.get(chunker_type)
        if chunker_class is None:
            raise ConfigurationError(
                f"Unknown chunker type: '{chunker_type}'. "
                f"Available types: {', '.join(cls._registry)}"
            )

        logger.debug(f"Creating {chunker_class.__name__}({params})")
        return chunker_class(**params)

    @classmethod
    def register(cls, chunker_type: str, chunker_class: type[BaseChunker]):
        if not issubclass(chunker_class, BaseChunker):
            raise TypeError(f"{chunker_class.__name__} must be a subclass of BaseChunker")

        cls._registry[chunker_type] = chunker_class
        logger.info(f"Registered chunker '{chunker_type}' -> {chunker_class.__name__}")

    @classmethod
    def list_types(cls) -> list[str]:
        return list(cls._registry)
