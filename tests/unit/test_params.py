from __future__ import annotations

from datetime import datetime, timezone

import pytest

from simple_json_client.datasource.params import (
    build_annotations_body,
    build_query_body,
    build_search_body,
    build_tag_keys_body,
    build_tag_values_body,
    normalize_targets,
)

FROM = datetime(2024, 1, 1, tzinfo=timezone.utc)
TO = datetime(2024, 1, 2, tzinfo=timezone.utc)


def test_query_body_wraps_each_target():
    body = build_query_body(["a", "b"], FROM, TO)
    assert body == {
        "targets": [
            {"type": "timeserie", "target": "a"},
            {"type": "timeserie", "target": "b"},
        ],
        "range": {
            "from": "2024-01-01T00:00:00.000Z",
            "to": "2024-01-02T00:00:00.000Z",
        },
    }


def test_query_body_accepts_single_target_string():
    body = build_query_body("cows", FROM, TO)
    assert body["targets"] == [{"type": "timeserie", "target": "cows"}]


def test_query_body_adds_optional_interval_and_max_data_points():
    body = build_query_body(["a"], FROM, TO, interval="30s", max_data_points=500)
    assert body["interval"] == "30s"
    assert body["maxDataPoints"] == 500


def test_query_body_rejects_non_positive_max_data_points():
    with pytest.raises(ValueError):
        build_query_body(["a"], FROM, TO, max_data_points=0)


def test_normalize_targets_rejects_non_str_entries():
    with pytest.raises(TypeError):
        normalize_targets(["a", 1])  # type: ignore[list-item]


def test_annotations_body_matches_protocol():
    body = build_annotations_body("deploys", FROM, TO)
    assert body == {
        "annotation": {"name": "deploys", "enable": True, "query": "#deploys"},
        "range": {
            "from": "2024-01-01T00:00:00.000Z",
            "to": "2024-01-02T00:00:00.000Z",
        },
    }


@pytest.mark.parametrize(
    ("target", "expected"),
    [("cows", {"target": "cows"}), ("", {"target": ""}), (None, {"target": ""})],
)
def test_search_body(target, expected):
    assert build_search_body(target) == expected


def test_tag_bodies():
    assert build_tag_keys_body() == {}
    assert build_tag_values_body("city") == {"key": "city"}
