"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from .config import ClientConfig
from .core.errors import ConfigurationError


def validate_client_config(config: ClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise ConfigurationError(str(exc)) from exc


__all__ = [
    "validate_client_config",
]
