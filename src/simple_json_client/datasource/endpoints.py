"""Endpoint table of the Simple JSON datasource protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ResponseShape(Enum):
    """Normalized shape an endpoint produces at best fidelity."""

    STATUS = "status"
    SEARCH = "search"
    QUERY = "query"
    OPAQUE = "opaque"


@dataclass(slots=True, frozen=True)
class EndpointSpec:
    name: str
    method: str
    path: str
    shape: ResponseShape


PING = EndpointSpec("ping", "GET", "/", ResponseShape.STATUS)
SEARCH = EndpointSpec("search", "POST", "/search", ResponseShape.SEARCH)
QUERY = EndpointSpec("query", "POST", "/query", ResponseShape.QUERY)
ANNOTATIONS = EndpointSpec("annotations", "POST", "/annotations", ResponseShape.OPAQUE)
TAG_KEYS = EndpointSpec("tag-keys", "POST", "/tag-keys", ResponseShape.OPAQUE)
TAG_VALUES = EndpointSpec("tag-values", "POST", "/tag-values", ResponseShape.OPAQUE)


__all__ = [
    "ResponseShape",
    "EndpointSpec",
    "PING",
    "SEARCH",
    "QUERY",
    "ANNOTATIONS",
    "TAG_KEYS",
    "TAG_VALUES",
]
