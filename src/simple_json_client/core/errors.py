"""Error types."""

from __future__ import annotations


class SimpleJsonError(Exception):
    """Base exception for this package."""

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        body: str | None = None,
        cause: str | None = None,
    ) -> None:
        super().__init__(message)
        self.http_status = http_status
        self.body = body
        self.cause = cause


class TransportError(SimpleJsonError):
    """Network failure or non-2xx HTTP status."""


class DecodeError(SimpleJsonError):
    """Response body is not JSON, or not the JSON shape the endpoint returns."""


class ConfigurationError(SimpleJsonError):
    """Invalid client configuration or response options."""


class ClientClosedError(SimpleJsonError):
    """Raised when client is used after close."""


__all__ = [
    "SimpleJsonError",
    "TransportError",
    "DecodeError",
    "ConfigurationError",
    "ClientClosedError",
]
