"""Datasource operations over the sync request executor."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.models import Connection
from ..core.options import Fidelity, scoped_options
from . import endpoints
from .executor import RequestExecutor
from .params import (
    Instant,
    build_annotations_body,
    build_query_body,
    build_search_body,
    build_tag_keys_body,
    build_tag_values_body,
)


class DatasourceService:
    """One method per protocol endpoint."""

    def __init__(self, executor: RequestExecutor) -> None:
        self._executor = executor

    def ping(self, conn: Connection) -> None:
        with scoped_options(fidelity=Fidelity.RAW):
            self._executor.execute(endpoints.PING, conn)

    def search(self, conn: Connection, target: str | None = "") -> object:
        return self._executor.execute(endpoints.SEARCH, conn, build_search_body(target))

    def query(
        self,
        conn: Connection,
        targets: str | Sequence[str],
        from_: Instant,
        to: Instant,
        *,
        interval: str | None = None,
        max_data_points: int | None = None,
    ) -> object:
        body = build_query_body(
            targets,
            from_,
            to,
            interval=interval,
            max_data_points=max_data_points,
        )
        return self._executor.execute(endpoints.QUERY, conn, body)

    def annotations(self, conn: Connection, target: str, from_: Instant, to: Instant) -> object:
        body = build_annotations_body(target, from_, to)
        return self._executor.execute(endpoints.ANNOTATIONS, conn, body)

    def tag_keys(self, conn: Connection) -> object:
        return self._executor.execute(endpoints.TAG_KEYS, conn, build_tag_keys_body())

    def tag_values(self, conn: Connection, key: str) -> object:
        return self._executor.execute(endpoints.TAG_VALUES, conn, build_tag_values_body(key))


__all__ = [
    "DatasourceService",
]
