"""Response fidelity options and their scoped overrides.

The options are read when a response completes, so a value set with
:func:`scoped_options` applies to every request finishing inside the ``with``
block of the current thread or asyncio task and to nothing else.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from enum import Enum

from .errors import ConfigurationError


class Fidelity(str, Enum):
    """How much post-processing is applied to a response."""

    RAW = "raw"
    BODY = "body"
    BEST = "best"


@dataclass(slots=True, frozen=True)
class ResponseOptions:
    fidelity: Fidelity | str = Fidelity.BEST
    convert: bool = True

    def __post_init__(self) -> None:
        if not isinstance(self.convert, bool):
            raise ConfigurationError(f"convert must be bool, got {self.convert!r}")

    def resolved_fidelity(self) -> Fidelity:
        return coerce_fidelity(self.fidelity)


_UNSET = object()
_default_lock = threading.Lock()
_default_options = ResponseOptions()
_scoped: ContextVar[ResponseOptions | None] = ContextVar(
    "simple_json_client_response_options",
    default=None,
)


def coerce_fidelity(value: object) -> Fidelity:
    if isinstance(value, Fidelity):
        return value
    try:
        return Fidelity(value)
    except ValueError as exc:
        raise ConfigurationError(f"unexpected fidelity level: {value!r}") from exc


def get_default_options() -> ResponseOptions:
    return _default_options


def set_default_options(options: ResponseOptions) -> ResponseOptions:
    """Replace the process-wide default options and return the previous ones."""

    global _default_options
    if not isinstance(options, ResponseOptions):
        raise TypeError("options must be ResponseOptions")
    with _default_lock:
        previous = _default_options
        _default_options = options
    return previous


def current_options() -> ResponseOptions:
    scoped = _scoped.get()
    if scoped is not None:
        return scoped
    return _default_options


@contextmanager
def scoped_options(
    *,
    fidelity: Fidelity | str | object = _UNSET,
    convert: bool | object = _UNSET,
) -> Iterator[ResponseOptions]:
    """Override fidelity and/or conversion for the enclosed block only."""

    changes: dict[str, object] = {}
    if fidelity is not _UNSET:
        changes["fidelity"] = fidelity
    if convert is not _UNSET:
        changes["convert"] = convert
    options = replace(current_options(), **changes)
    token = _scoped.set(options)
    try:
        yield options
    finally:
        _scoped.reset(token)


__all__ = [
    "Fidelity",
    "ResponseOptions",
    "coerce_fidelity",
    "get_default_options",
    "set_default_options",
    "current_options",
    "scoped_options",
]
