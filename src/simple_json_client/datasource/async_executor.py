"""Async request executor: one HTTP round trip, then fidelity resolution."""

from __future__ import annotations

import logging
from typing import Protocol

from ..core.models import Connection
from ..core.response_parsing import JsonPayloadResponse
from .endpoints import EndpointSpec
from .executor_shared import prepare_request, resolve_response

logger = logging.getLogger("simple_json_client")


class AsyncRequestTransport(Protocol):
    async def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        content: str | None = None,
    ) -> JsonPayloadResponse: ...


class AsyncRequestExecutor:
    """Executes a single endpoint call through an async transport."""

    def __init__(self, transport: AsyncRequestTransport) -> None:
        self._transport = transport

    async def execute(
        self,
        endpoint: EndpointSpec,
        conn: Connection,
        body: object | None = None,
    ) -> object:
        prepared = prepare_request(endpoint, conn, body)
        response = await self._transport.request(
            prepared.method,
            prepared.url,
            headers=dict(prepared.headers),
            content=prepared.content,
        )
        # Options are read after the await so a scope active at completion wins.
        result = resolve_response(response, endpoint)
        logger.info("request success endpoint=%s", endpoint.name)
        return result


__all__ = [
    "AsyncRequestExecutor",
]
