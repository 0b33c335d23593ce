"""Normalized response shapes."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class SeriesContext:
    """Identifies one series within a query result."""

    unit: str | None
    label: str | None


Timestamp = datetime | int | float
SearchResult = dict[object, object]
SeriesValues = dict[Timestamp, object]
QueryResult = tuple[tuple[SeriesContext, SeriesValues], ...]


__all__ = [
    "SeriesContext",
    "Timestamp",
    "SearchResult",
    "SeriesValues",
    "QueryResult",
]
