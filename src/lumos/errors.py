"""
Exception hierarchy for Lumos.

Only the embedder, document store and document manager raise these; the
chunker and the document processor are total over their inputs.

    LumosError
    ├── RetryableError        (worth another attempt)
    │   ├── RateLimitError            HTTP 429
    │   ├── ServiceUnavailableError   HTTP 503
    │   ├── TransientError            other 5xx
    │   ├── ConnectionError
    │   └── TimeoutError
    ├── PermanentError        (retrying cannot help)
    │   ├── AuthenticationError       HTTP 401/403
    │   ├── InvalidRequestError       HTTP 400
    │   ├── NotFoundError             HTTP 404
    │   └── ConfigurationError
    ├── EmbeddingError
    └── DocumentStoreError
        └── DocumentNotFoundError

Usage:
------
    from lumos.errors import DocumentNotFoundError

    try:
        hits = store.search(document_id, "quarterly revenue")
    except DocumentNotFoundError as e:
        logger.warning(f"Unknown document {e.document_id}")
"""

from typing import Any


class LumosError(Exception):
    """
    Base exception for all Lumos errors.

    Attributes:
        message: Human-readable error description
        details: Extra context (status code, document id, ...)
        original_error: The exception this one was raised from, if any
    """

    default_message = "Lumos error"

    def __init__(
        self,
        message: str | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message or self.default_message
        self.details = details or {}
        self.original_error = original_error
        super().__init__(self.message)

    def __str__(self) -> str:
        parts = [self.message]
        if self.details:
            parts.append(f"Details: {self.details}")
        if self.original_error:
            parts.append(f"Caused by: {type(self.original_error).__name__}: {self.original_error}")
        return " | ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Structured form for log records and API payloads."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None,
        }


# =============================================================================
# Retryable Errors
# =============================================================================

class RetryableError(LumosError):
    """
    A failure that may go away on its own.

    Attributes:
        retry_after: Server-suggested wait in seconds, when known
    """

    default_message = "Transient failure"

    def __init__(
        self,
        message: str | None = None,
        retry_after: float | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ):
        super().__init__(message, details, original_error)
        self.retry_after = retry_after


class RateLimitError(RetryableError):
    default_message = "API rate limit exceeded"


class ServiceUnavailableError(RetryableError):
    default_message = "Service temporarily unavailable"


class TransientError(RetryableError):
    """Unclassified server-side failure (5xx other than 503)."""


class ConnectionError(RetryableError):
    default_message = "Failed to connect to service"


class TimeoutError(RetryableError):
    """
    The request did not complete within its time limit.

    Attributes:
        timeout: The limit that was exceeded, in seconds
    """

    default_message = "Request timed out"

    def __init__(
        self,
        message: str | None = None,
        timeout: float | None = None,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None,
    ):
        details = {**(details or {}), "timeout": timeout}
        super().__init__(message, details=details, original_error=original_error)
        self.timeout = timeout


# =============================================================================
# Permanent Errors
# =============================================================================

class PermanentError(LumosError):
    """A failure that will repeat however often the call is retried."""

    default_message = "Permanent failure"


class AuthenticationError(PermanentError):
    default_message = "Authentication failed"


class InvalidRequestError(PermanentError):
    default_message = "Invalid request parameters"


class NotFoundError(PermanentError):
    default_message = "Resource not found"


class ConfigurationError(PermanentError):
    """Missing API key, unknown component type and similar setup problems."""

    default_message = "Configuration error"


# =============================================================================
# Domain Errors
# =============================================================================

class EmbeddingError(LumosError):
    """The embedding backend answered, but not with usable vectors."""

    default_message = "Embedding failed"


class DocumentStoreError(LumosError):
    default_message = "Document store operation failed"


class DocumentNotFoundError(DocumentStoreError):
    """No store entry exists for the requested document id."""

    def __init__(self, document_id: str, message: str | None = None):
        super().__init__(
            message or f"Vector store for document {document_id} not found",
            details={"document_id": document_id},
        )
        self.document_id = document_id


# =============================================================================
# Helpers
# =============================================================================

def is_retryable(error: Exception) -> bool:
    return isinstance(error, RetryableError)


_STATUS_ERRORS: dict[int, tuple[type[LumosError], str]] = {
    400: (InvalidRequestError, "Invalid request parameters"),
    401: (AuthenticationError, "Authentication failed - invalid API key"),
    403: (AuthenticationError, "Access forbidden - insufficient permissions"),
    404: (NotFoundError, "Resource not found"),
    429: (RateLimitError, "API rate limit exceeded"),
    503: (ServiceUnavailableError, "Service temporarily unavailable"),
}


def _parse_retry_after(headers: dict) -> float | None:
    value = headers.get("Retry-After") or headers.get("retry-after")
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        # HTTP-date form; callers fall back to exponential backoff.
        return None


def classify_http_error(status_code: int, message: str = "", headers: dict | None = None) -> LumosError:
    """
    Map an HTTP error response onto the exception hierarchy.

    Args:
        status_code: HTTP status code of the response
        message: Response body or error text
        headers: Response headers, consulted for Retry-After

    Returns:
        The matching LumosError instance (not raised)
    """
    details = {"status_code": status_code}

    if status_code in _STATUS_ERRORS:
        error_class, fallback = _STATUS_ERRORS[status_code]
        if issubclass(error_class, RetryableError):
            return error_class(
                message or fallback,
                retry_after=_parse_retry_after(headers or {}),
                details=details,
            )
        return error_class(message or fallback, details=details)

    if status_code >= 500:
        return TransientError(message or f"Server error (HTTP {status_code})", details=details)
    return PermanentError(message or f"HTTP error {status_code}", details=details)
