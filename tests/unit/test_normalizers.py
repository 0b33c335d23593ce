from __future__ import annotations

from datetime import datetime, timezone

import pytest

from simple_json_client.core.errors import DecodeError
from simple_json_client.datasource.endpoints import ResponseShape
from simple_json_client.datasource.models import SeriesContext
from simple_json_client.datasource.normalizers import normalize, normalize_query, normalize_search


def test_search_maps_value_to_text(fixture_loader):
    payload = fixture_loader("search_response.json")
    assert normalize_search(payload) == {"id1": "nb-of-babies", "id2": "pct-of-cows"}


def test_search_last_duplicate_wins():
    payload = [
        {"value": "id1", "text": "first"},
        {"value": "id2", "text": "other"},
        {"value": "id1", "text": "second"},
    ]
    assert normalize_search(payload) == {"id1": "second", "id2": "other"}


def test_search_missing_fields_become_none():
    payload = [{"value": "id1"}, {"text": "orphan"}]
    assert normalize_search(payload) == {"id1": None, None: "orphan"}


def test_search_empty_list_gives_empty_mapping():
    assert normalize_search([]) == {}


@pytest.mark.parametrize(
    "payload",
    [{"value": "id1"}, ["id1"], "id1"],
    ids=["object-root", "non-object-element", "string-root"],
)
def test_search_rejects_unexpected_shapes(payload):
    with pytest.raises(DecodeError):
        normalize_search(payload)


def test_query_without_conversion_keeps_raw_timestamps():
    payload = [
        {
            "times": [1600, 1601],
            "data": [{"label": "cows", "unit": "percent", "data": [0.1, 0.2]}],
        }
    ]
    result = normalize_query(payload, convert=False)
    assert result == ((SeriesContext(unit="percent", label="cows"), {1600: 0.1, 1601: 0.2}),)


def test_query_with_conversion_uses_utc_datetimes():
    payload = [
        {
            "times": [1600000000, 1600000000.5],
            "data": [{"label": "cows", "unit": "percent", "data": [0.1, 0.2]}],
        }
    ]
    ((context, points),) = normalize_query(payload, convert=True)
    assert context == SeriesContext(unit="percent", label="cows")
    assert points == {
        datetime(2020, 9, 13, 12, 26, 40, tzinfo=timezone.utc): 0.1,
        datetime(2020, 9, 13, 12, 26, 40, 500000, tzinfo=timezone.utc): 0.2,
    }


def test_query_flattens_in_target_then_series_order(fixture_loader):
    payload = fixture_loader("query_response.json")
    result = normalize_query(payload, convert=False)
    assert [context.label for context, _ in result] == ["cows", "babies", "tractors"]
    assert result[1][1] == {1600000000: 3, 1600000060: 4, 1600000120: 5}
    assert result[2][0] == SeriesContext(unit=None, label="tractors")
    assert len(result[2][1]) == 2


@pytest.mark.parametrize(
    ("times", "values", "expected"),
    [
        ([1, 2, 3], [10, 20], {1: 10, 2: 20}),
        ([1], [10, 20, 30], {1: 10}),
        ([], [10], {}),
    ],
    ids=["more-times", "more-values", "no-times"],
)
def test_query_pairs_up_to_shorter_list(times, values, expected):
    payload = [{"times": times, "data": [{"label": "a", "unit": "u", "data": values}]}]
    ((_, points),) = normalize_query(payload, convert=False)
    assert points == expected


def test_query_missing_series_fields_become_none():
    payload = [{"times": [1], "data": [{"data": [5]}]}]
    ((context, points),) = normalize_query(payload, convert=False)
    assert context == SeriesContext(unit=None, label=None)
    assert points == {1: 5}


def test_query_target_without_series_contributes_nothing():
    payload = [{"times": [1, 2], "data": []}, {"times": [], "data": [{"label": "x", "data": []}]}]
    result = normalize_query(payload, convert=True)
    assert result == ((SeriesContext(unit=None, label="x"), {}),)


def test_query_result_is_tuple():
    assert normalize_query([], convert=True) == ()


def test_query_conversion_rejects_non_numeric_timestamp():
    payload = [{"times": ["2020-01-01"], "data": [{"label": "a", "data": [1]}]}]
    with pytest.raises(DecodeError):
        normalize_query(payload, convert=True)


def test_query_rejects_non_list_root():
    with pytest.raises(DecodeError, match="query response must be a list"):
        normalize_query({"times": []}, convert=False)


def test_normalize_dispatches_by_shape():
    payload = [{"value": "id1", "text": "a"}]
    assert normalize(ResponseShape.SEARCH, payload, convert=True) == {"id1": "a"}
    assert normalize(ResponseShape.QUERY, [], convert=True) == ()


@pytest.mark.parametrize("shape", [ResponseShape.OPAQUE, ResponseShape.STATUS])
def test_normalize_passes_through_shapes_without_normalizer(shape):
    payload = {"anything": [1, 2]}
    assert normalize(shape, payload, convert=True) is payload


@pytest.mark.parametrize(
    "timestamp",
    [1600000000000, 1e300, float("nan"), float("inf"), float("-inf")],
    ids=["epoch-milliseconds", "huge", "nan", "inf", "negative-inf"],
)
def test_query_conversion_rejects_out_of_range_timestamps(timestamp):
    payload = [{"times": [timestamp], "data": [{"label": "a", "data": [1]}]}]
    with pytest.raises(DecodeError, match="query timestamp out of range"):
        normalize_query(payload, convert=True)


def test_query_without_conversion_rejects_unhashable_timestamps():
    payload = [{"times": [[1600]], "data": [{"label": "a", "data": [1]}]}]
    with pytest.raises(DecodeError, match="query timestamps must be scalars"):
        normalize_query(payload, convert=False)


@pytest.mark.parametrize("value", [["x"], {"id": "x"}], ids=["array", "object"])
def test_search_rejects_unhashable_values(value):
    with pytest.raises(DecodeError, match="search response value must be a scalar"):
        normalize_search([{"value": value, "text": "t"}])


def test_query_conversion_merges_timestamps_within_one_millisecond():
    payload = [{"times": [1600.0001, 1600.0002], "data": [{"label": "a", "data": [1, 2]}]}]
    ((_, points),) = normalize_query(payload, convert=True)
    assert points == {datetime(1970, 1, 1, 0, 26, 40, tzinfo=timezone.utc): 2}
