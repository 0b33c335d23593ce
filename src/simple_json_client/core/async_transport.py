"""Async HTTP transport: one request, status check, no retries."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Protocol

import httpx

from ..config import ClientConfig
from .errors import TransportError
from .transport_shared import (
    build_default_headers,
    build_default_timeout,
    network_error,
    status_error,
)

logger = logging.getLogger("simple_json_client")


class AsyncTransportClient(Protocol):
    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str] | None = None,
        content: str | None = None,
    ) -> httpx.Response: ...

    async def aclose(self) -> None: ...


class AsyncTransport:
    """Asynchronous transport for a Simple JSON datasource."""

    def __init__(
        self,
        config: ClientConfig,
        *,
        client: AsyncTransportClient | None = None,
    ) -> None:
        self._config = config
        self._closed = False
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=build_default_headers(config),
            timeout=build_default_timeout(config),
        )

    @property
    def closed(self) -> bool:
        return self._closed

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._owns_client and hasattr(self._client, "aclose"):
            await self._client.aclose()

    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: Mapping[str, str],
        content: str | None = None,
    ) -> httpx.Response:
        if self._closed:
            raise TransportError("transport is already closed")

        logger.debug("request start method=%s url=%s", method, url)
        try:
            response = await self._client.request(method, url, headers=headers, content=content)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "request failed method=%s url=%s http_status=%s",
                method,
                url,
                exc.response.status_code,
            )
            raise status_error(exc) from exc
        except Exception as exc:
            logger.error(
                "request network error method=%s url=%s error=%s",
                method,
                url,
                exc.__class__.__name__,
            )
            raise network_error(exc) from exc

        logger.debug(
            "response received method=%s url=%s http_status=%s",
            method,
            url,
            response.status_code,
        )
        return response


__all__ = [
    "AsyncTransport",
]
