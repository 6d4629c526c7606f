"""Mock embedder for testing (no external API)."""

import hashlib
import random

from loguru import logger

from ..base import BaseEmbedder


class MockEmbedder(BaseEmbedder):
    """Generates deterministic pseudo-random embeddings for testing.

    WARNING: This embedder is NOT suitable for production use.
    Vectors carry no semantics beyond exact-text identity.

    Attributes:
        dimension: Embedding vector dimension
        seed: Seed mixed into every per-text generator
    """

    def __init__(self, dimension: int = 384, seed: int = 42):
        if dimension < 1:
            raise ValueError("dimension must be positive")
        self._dimension = dimension
        self.seed = seed
        logger.warning(
            "Using MockEmbedder - NOT for production use! "
            "Replace with a real embedder for actual applications."
        )

    def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            raise ValueError("texts cannot be empty")

        logger.debug(f"Generating {len(texts)} mock embeddings")
        return [self._embed_one(text) for text in texts]

    def _embed_one(self, text: str) -> list[float]:
        # Stable across processes, unlike the builtin hash().
        digest = hashlib.sha256(text.encode("utf-8", errors="surrogatepass")).digest()
        rng = random.Random(int.from_bytes(digest[:8], "big") + self.seed)

        vec = [rng.gauss(0, 1) for _ in range(self._dimension)]
        magnitude = sum(x**2 for x in vec) ** 0.5
        if magnitude == 0:
            return [0.0] * self._dimension
        return [x / magnitude for x in vec]

    @property
    def dimension(self) -> int:
        return self._dimension
