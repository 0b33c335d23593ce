"""Shared JSON body helpers for sync/async execution."""

from __future__ import annotations

from typing import Protocol

from .errors import DecodeError


class JsonPayloadResponse(Protocol):
    def json(self) -> object: ...


def decode_json_body(response: JsonPayloadResponse) -> object:
    """Decode response JSON body and map parse failures to ``DecodeError``."""

    http_status = getattr(response, "status_code", None)
    try:
        return response.json()
    except Exception as exc:
        raise DecodeError(
            "response body is not valid JSON",
            http_status=http_status,
            body=getattr(response, "text", None),
        ) from exc


__all__ = [
    "decode_json_body",
]
