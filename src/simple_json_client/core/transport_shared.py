"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

from collections.abc import Mapping

import httpx

from ..config import ClientConfig
from .errors import TransportError


def build_default_headers(config: ClientConfig) -> Mapping[str, str]:
    return {
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: ClientConfig) -> httpx.Timeout:
    return httpx.Timeout(
        connect=config.transport.timeout_connect_seconds,
        read=config.transport.timeout_read_seconds,
        write=config.transport.timeout_write_seconds,
        pool=config.transport.timeout_pool_seconds,
    )


def status_error(exc: httpx.HTTPStatusError) -> TransportError:
    response = exc.response
    return TransportError(
        f"HTTP {response.status_code} from {exc.request.url}",
        http_status=response.status_code,
        body=_safe_text(response),
        cause="http_status",
    )


def network_error(exc: Exception) -> TransportError:
    return TransportError(
        f"network/transport error: {exc.__class__.__name__}",
        cause="network",
    )


def _safe_text(response: httpx.Response) -> str | None:
    try:
        return response.text
    except httpx.ResponseNotRead:
        return None


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "status_error",
    "network_error",
]
