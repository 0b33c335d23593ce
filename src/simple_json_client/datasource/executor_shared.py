"""Request preparation and fidelity resolution shared by sync/async executors."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from ..core.errors import ConfigurationError, DecodeError
from ..core.models import Connection
from ..core.options import Fidelity, ResponseOptions, current_options
from ..core.response_parsing import JsonPayloadResponse, decode_json_body
from .endpoints import EndpointSpec
from .normalizers import normalize

logger = logging.getLogger("simple_json_client")

JSON_MEDIA_TYPE = "application/json"


@dataclass(slots=True, frozen=True)
class PreparedRequest:
    method: str
    url: str
    headers: Mapping[str, str]
    content: str | None


def prepare_request(
    endpoint: EndpointSpec,
    conn: Connection,
    body: object | None = None,
) -> PreparedRequest:
    """Build method, URL, headers and JSON payload for one endpoint call.

    ``content-type`` is only sent together with a body.
    """

    try:
        conn.validate()
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc

    headers = {"accept": JSON_MEDIA_TYPE}
    content: str | None = None
    if body is not None:
        content = json.dumps(body)
        headers["content-type"] = JSON_MEDIA_TYPE
    return PreparedRequest(
        method=endpoint.method,
        url=conn.endpoint_url(endpoint.path),
        headers=headers,
        content=content,
    )


def resolve_response(
    response: JsonPayloadResponse,
    endpoint: EndpointSpec,
    *,
    options: ResponseOptions | None = None,
) -> object:
    """Reduce a completed response to the configured fidelity."""

    options = options or current_options()
    fidelity = options.resolved_fidelity()
    if fidelity is Fidelity.RAW:
        return response

    try:
        payload = decode_json_body(response)
        if fidelity is Fidelity.BODY:
            return payload
        return normalize(endpoint.shape, payload, convert=options.convert)
    except DecodeError:
        logger.error(
            "response decode failed endpoint=%s fidelity=%s",
            endpoint.name,
            fidelity.value,
        )
        raise


__all__ = [
    "PreparedRequest",
    "prepare_request",
    "resolve_response",
]
