"""
Schlep-engine SDK exceptions.

Every exception carries a ``kind`` tag so callers can branch on the failure
category without caring about the concrete subclass.

Author: Yobie Benjamin
Date: 2026-10-19
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of an SDK failure."""
    TRANSPORT = "transport"
    INVALID_RESPONSE = "invalid_response"
    API = "api"
    CONFIGURATION = "configuration"
    URL = "url"
    STREAM = "stream"


class SchlepError(Exception):
    """Base exception for all Schlep-engine SDK errors."""

    kind: ErrorKind

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(SchlepError):
    """Raised when the SDK is misconfigured (e.g. empty API key)."""
    kind = ErrorKind.CONFIGURATION


class InvalidURLError(SchlepError):
    """Raised when the base URL or a derived stream URL is malformed."""
    kind = ErrorKind.URL


class TransportError(SchlepError):
    """Raised when the HTTP exchange could not be completed."""
    kind = ErrorKind.TRANSPORT


class RequestTimeoutError(TransportError):
    """Raised when a request times out."""
    pass


class InvalidResponseError(SchlepError):
    """Raised when a successful response body cannot be decoded."""
    kind = ErrorKind.INVALID_RESPONSE


class APIError(SchlepError):
    """Raised when the API answers with a non-2xx status."""
    kind = ErrorKind.API

    def __init__(
        self,
        message: str,
        status_code: int,
        details: dict | None = None
    ):
        super().__init__(message, details)
        self.status_code = status_code

    def __str__(self) -> str:
        return f"API error {self.status_code}: {self.message}"


class AuthenticationError(APIError):
    """Raised on 401/403: the API key is invalid or lacks permission."""
    pass


class ResourceNotFoundError(APIError):
    """Raised on 404."""
    pass


class RateLimitError(APIError):
    """Raised on 429."""

    def __init__(
        self,
        message: str,
        status_code: int = 429,
        retry_after: int | None = None,
        details: dict | None = None
    ):
        super().__init__(message, status_code, details)
        self.retry_after = retry_after


class StreamError(SchlepError):
    """Raised when the streaming WebSocket cannot be established."""
    kind = ErrorKind.STREAM
