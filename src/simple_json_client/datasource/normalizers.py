"""Per-endpoint reshaping of decoded response bodies."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from ..core.errors import DecodeError
from .endpoints import ResponseShape
from .models import QueryResult, SearchResult, SeriesContext, SeriesValues, Timestamp
from .timefmt import epoch_seconds_to_instant

JsonObject = dict[str, object]


def _as_list(payload: object, what: str) -> list[object]:
    if not isinstance(payload, list):
        raise DecodeError(f"{what} must be a list")
    return payload


def _as_object(item: object, what: str) -> JsonObject:
    if not isinstance(item, dict):
        raise DecodeError(f"{what} must be an object")
    return item


def _paired(left: list[object], right: list[object]) -> Iterable[tuple[object, object]]:
    limit = min(len(left), len(right))
    for idx in range(limit):
        yield left[idx], right[idx]


def normalize_search(payload: object) -> SearchResult:
    """Map each entry's ``value`` to its ``text``; later duplicates win."""

    result: SearchResult = {}
    for item in _as_list(payload, "search response"):
        entry = _as_object(item, "search response element")
        value = entry.get("value")
        try:
            result[value] = entry.get("text")
        except TypeError as exc:
            raise DecodeError(f"search response value must be a scalar, got {value!r}") from exc
    return result


def _timestamp_key(raw: object, *, convert: bool) -> Timestamp:
    if not convert:
        return raw  # type: ignore[return-value]
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise DecodeError(f"query timestamp must be a number, got {raw!r}")
    try:
        return epoch_seconds_to_instant(raw)
    except (OverflowError, ValueError) as exc:
        raise DecodeError(f"query timestamp out of range: {raw!r}") from exc


def _normalize_target_result(
    target_result: JsonObject,
    *,
    convert: bool,
) -> list[tuple[SeriesContext, SeriesValues]]:
    times = target_result.get("times") or []
    series_list = target_result.get("data") or []
    if not isinstance(times, list):
        raise DecodeError("query response 'times' must be a list")

    pairs: list[tuple[SeriesContext, SeriesValues]] = []
    for raw_series in _as_list(series_list, "query response 'data'"):
        series = _as_object(raw_series, "query series")
        values = series.get("data") or []
        if not isinstance(values, list):
            raise DecodeError("query series 'data' must be a list")
        context = SeriesContext(unit=series.get("unit"), label=series.get("label"))
        try:
            points: SeriesValues = {
                _timestamp_key(timestamp, convert=convert): value
                for timestamp, value in _paired(times, values)
            }
        except TypeError as exc:
            raise DecodeError("query timestamps must be scalars") from exc
        pairs.append((context, points))
    return pairs


def normalize_query(payload: object, *, convert: bool = True) -> QueryResult:
    """Flatten per-target results into ``(SeriesContext, {timestamp: value})`` pairs.

    Order is target order, then series order within each target. Timestamps and
    values are paired index by index up to the shorter of the two lists. With
    ``convert`` the epoch-second timestamps become aware UTC datetimes, resolved
    to whole milliseconds, so timestamps rounding to the same millisecond share
    one key and the later value wins.
    """

    pairs: list[tuple[SeriesContext, SeriesValues]] = []
    for item in _as_list(payload, "query response"):
        target_result = _as_object(item, "query response element")
        pairs.extend(_normalize_target_result(target_result, convert=convert))
    return tuple(pairs)


def _search_shape(payload: object, *, convert: bool) -> SearchResult:
    return normalize_search(payload)


_NORMALIZERS: dict[ResponseShape, Callable[..., object]] = {
    ResponseShape.SEARCH: _search_shape,
    ResponseShape.QUERY: normalize_query,
}


def normalize(shape: ResponseShape, payload: object, *, convert: bool) -> object:
    """Apply the normalizer registered for ``shape``; opaque shapes pass through."""

    normalizer = _NORMALIZERS.get(shape)
    if normalizer is None:
        return payload
    return normalizer(payload, convert=convert)


__all__ = [
    "normalize_search",
    "normalize_query",
    "normalize",
]
