"""Core value objects."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class Connection:
    """Location of a Simple JSON datasource."""

    url: str

    def validate(self) -> None:
        if not isinstance(self.url, str) or not self.url:
            raise ValueError("connection url must not be empty")

    def endpoint_url(self, path: str) -> str:
        return self.url.rstrip("/") + path


__all__ = [
    "Connection",
]
