"""Conversions between time instants and the API's wire forms."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def _as_utc(instant: datetime | int | float) -> datetime:
    if isinstance(instant, datetime):
        if instant.tzinfo is None:
            return instant.replace(tzinfo=timezone.utc)
        return instant.astimezone(timezone.utc)
    if isinstance(instant, bool) or not isinstance(instant, (int, float)):
        raise TypeError("instant must be datetime or epoch seconds")
    return epoch_seconds_to_instant(instant)


def _as_offset(tz_offset: int | float | timedelta) -> timezone:
    if isinstance(tz_offset, timedelta):
        return timezone(tz_offset)
    return timezone(timedelta(hours=tz_offset))


def format_instant(
    instant: datetime | int | float,
    fmt: str | None = None,
    *,
    tz_offset: int | float | timedelta = 0,
) -> str:
    """Render ``instant`` as text in the zone ``tz_offset`` hours from UTC.

    Naive datetimes are taken as UTC. Without ``fmt`` the result is ISO-8601
    with millisecond precision, using ``Z`` for a zero offset.
    """

    shifted = _as_utc(instant).astimezone(_as_offset(tz_offset))
    if fmt is not None:
        return shifted.strftime(fmt)
    text = shifted.isoformat(timespec="milliseconds")
    if text.endswith("+00:00"):
        return text[: -len("+00:00")] + "Z"
    return text


def format_instant_for_query(instant: datetime | int | float) -> str:
    """ISO-8601 form of ``instant`` as expected in a request ``range``."""

    return format_instant(instant)


def epoch_seconds_to_instant(value: int | float) -> datetime:
    # Wire timestamps are epoch seconds; resolution is kept to the millisecond.
    epoch_ms = round(value * 1000)
    return _EPOCH + timedelta(milliseconds=epoch_ms)


__all__ = [
    "format_instant",
    "format_instant_for_query",
    "epoch_seconds_to_instant",
]
