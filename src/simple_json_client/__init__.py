"""Public package exports for the Simple JSON datasource client."""

from .async_client import AsyncSimpleJsonClient
from .client import SimpleJsonClient
from .config import ClientConfig
from .core.models import Connection
from .core.options import (
    Fidelity,
    ResponseOptions,
    current_options,
    scoped_options,
    set_default_options,
)

__all__ = [
    "SimpleJsonClient",
    "AsyncSimpleJsonClient",
    "ClientConfig",
    "Connection",
    "Fidelity",
    "ResponseOptions",
    "scoped_options",
    "set_default_options",
    "current_options",
]
