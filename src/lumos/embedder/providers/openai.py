"""OpenAI-compatible embedder over the REST embeddings endpoint."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from ...errors import (
    ConfigurationError,
    ConnectionError,
    EmbeddingError,
    TimeoutError,
    classify_http_error,
)
from ...utils.retry import RetryConfig, retry_with_backoff
from ..base import BaseEmbedder

DEFAULT_BASE_URL = "https://api.openai.com/v1"

_MODEL_DIMENSIONS = {
    "text-embedding-3-small": 1536,
    "text-embedding-3-large": 3072,
    "text-embedding-ada-002": 1536,
}


class OpenAIEmbedder(BaseEmbedder):
    """Embeds texts with an OpenAI-compatible ``/embeddings`` endpoint.

    Args:
        api_key: Bearer token for the API
        model: Embedding model name
        base_url: API root, e.g. ``https://api.openai.com/v1``
        timeout: Request timeout in seconds
        batch_size: Maximum texts per request
        dimension: Vector size; inferred from known models when omitted
        retry_config: Backoff policy for retryable failures
        client: Preconfigured ``httpx.Client`` (mainly for tests)

    Usage example:
        >>> embedder = OpenAIEmbedder(api_key="sk-...")
        >>> vectors = embedder.embed(["quarterly revenue grew"])
    """

    def __init__(
        self,
        api_key: str | None,
        model: str = "text-embedding-3-small",
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
        batch_size: int = 100,
        dimension: int | None = None,
        retry_config: RetryConfig | None = None,
        client: httpx.Client | None = None,
    ):
        if not api_key:
            raise ConfigurationError(
                "OpenAIEmbedder requires 'api_key' (set OPENAI_API_KEY)"
            )
        if batch_size < 1:
            raise ValueError("batch_size must be positive")

        dimension = dimension or _MODEL_DIMENSIONS.get(model)
        if dimension is None:
            raise ConfigurationError(
                f"Unknown dimension for model '{model}', pass 'dimension' explicitly"
            )

        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.batch_size = batch_size
        self.retry_config = retry_config or RetryConfig()
        self._dimension = dimension
        self._client = client or httpx.Client(timeout=timeout)

        logger.info(f"Initialized OpenAIEmbedder with model='{model}', timeout={timeout}s")

    @property
    def dimension(self) -> int:
        return self._dimension

    def embed(self, texts: list[str]) -> list[list[float]]:
        if not texts:
            raise ValueError("texts cannot be empty")

        post = retry_with_backoff(config=self.retry_config)(self._embed_batch)

        embeddings: list[list[float]] = []
        for start in range(0, len(texts), self.batch_size):
            batch = texts[start : start + self.batch_size]
            embeddings.extend(post(batch))

        logger.debug(f"Embedded {len(texts)} texts with {self.model}")
        return embeddings

    def close(self) -> None:
        self._client.close()

    def _embed_batch(self, batch: list[str]) -> list[list[float]]:
        # The API rejects empty strings, and an empty document is one empty chunk.
        payload = {"model": self.model, "input": [text or " " for text in batch]}
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        try:
            response = self._client.post(
                f"{self.base_url}/embeddings", json=payload, headers=headers
            )
        except httpx.TimeoutException as e:
            raise TimeoutError(
                f"Embedding request timed out after {self.timeout}s",
                timeout=self.timeout,
                original_error=e,
            ) from e
        except httpx.TransportError as e:
            raise ConnectionError(
                f"Failed to reach embedding API at {self.base_url}", original_error=e
            ) from e

        if response.status_code >= 400:
            raise classify_http_error(
                response.status_code, response.text, dict(response.headers)
            )

        return self._parse_response(response.json(), len(batch))

    def _parse_response(self, body: dict[str, Any], expected: int) -> list[list[float]]:
        """Order embeddings by their ``index`` field.

        Response format:
        {
            "object": "list",
            "data": [{"object": "embedding", "index": 0, "embedding": [...]}, ...],
            "model": "text-embedding-3-small"
        }
        """
        data = body.get("data")
        if not isinstance(data, list) or len(data) != expected:
            raise EmbeddingError(
                "Malformed embedding response",
                details={"expected": expected, "received": len(data) if isinstance(data, list) else None},
            )
        ordered = sorted(data, key=lambda item: item.get("index", 0))
        return [item["embedding"] for item in ordered]
