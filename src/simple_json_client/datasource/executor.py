"""Sync request executor: one HTTP round trip, then fidelity resolution."""

from __future__ import annotations

import logging
from typing import Protocol

from ..core.models import Connection
from ..core.response_parsing import JsonPayloadResponse
from .endpoints import EndpointSpec
from .executor_shared import prepare_request, resolve_response

logger = logging.getLogger("simple_json_client")


class RequestTransport(Protocol):
    def request(
        self,
        method: str,
        url: str,
        *,
        headers: dict[str, str],
        content: str | None = None,
    ) -> JsonPayloadResponse: ...


class RequestExecutor:
    """Executes a single endpoint call through a sync transport."""

    def __init__(self, transport: RequestTransport) -> None:
        self._transport = transport

    def execute(
        self,
        endpoint: EndpointSpec,
        conn: Connection,
        body: object | None = None,
    ) -> object:
        prepared = prepare_request(endpoint, conn, body)
        response = self._transport.request(
            prepared.method,
            prepared.url,
            headers=dict(prepared.headers),
            content=prepared.content,
        )
        result = resolve_response(response, endpoint)
        logger.info("request success endpoint=%s", endpoint.name)
        return result


__all__ = [
    "RequestExecutor",
]
