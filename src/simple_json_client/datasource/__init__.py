"""Simple JSON datasource endpoints and response shapes."""

from .models import QueryResult, SearchResult, SeriesContext, SeriesValues
from .timefmt import epoch_seconds_to_instant, format_instant, format_instant_for_query

__all__ = [
    "SeriesContext",
    "SearchResult",
    "SeriesValues",
    "QueryResult",
    "format_instant",
    "format_instant_for_query",
    "epoch_seconds_to_instant",
]
