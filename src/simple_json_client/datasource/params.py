"""Request body builders for datasource endpoints."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from .timefmt import format_instant_for_query

Instant = datetime | int | float


def normalize_targets(targets: str | Sequence[str]) -> tuple[str, ...]:
    if isinstance(targets, str):
        return (targets,)
    if not isinstance(targets, Sequence):
        raise TypeError("targets must be str or Sequence[str]")
    normalized: list[str] = []
    for target in targets:
        if not isinstance(target, str):
            raise TypeError("target entries must be str")
        normalized.append(target)
    return tuple(normalized)


def build_range(from_: Instant, to: Instant) -> dict[str, str]:
    return {
        "from": format_instant_for_query(from_),
        "to": format_instant_for_query(to),
    }


def build_search_body(target: str | None) -> dict[str, object]:
    return {"target": "" if target is None else str(target)}


def build_query_body(
    targets: str | Sequence[str],
    from_: Instant,
    to: Instant,
    *,
    interval: str | None = None,
    max_data_points: int | None = None,
) -> dict[str, object]:
    body: dict[str, object] = {
        "targets": [
            {"type": "timeserie", "target": target} for target in normalize_targets(targets)
        ],
        "range": build_range(from_, to),
    }
    if interval:
        body["interval"] = interval
    if max_data_points is not None:
        if max_data_points < 1:
            raise ValueError("max_data_points must be >= 1")
        body["maxDataPoints"] = max_data_points
    return body


def build_annotations_body(target: str, from_: Instant, to: Instant) -> dict[str, object]:
    return {
        "annotation": {
            "name": target,
            "enable": True,
            "query": f"#{target}",
        },
        "range": build_range(from_, to),
    }


def build_tag_keys_body() -> dict[str, object]:
    return {}


def build_tag_values_body(key: str) -> dict[str, object]:
    return {"key": key}


__all__ = [
    "normalize_targets",
    "build_range",
    "build_search_body",
    "build_query_body",
    "build_annotations_body",
    "build_tag_keys_body",
    "build_tag_values_body",
]
