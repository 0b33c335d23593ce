"""Datasource operations over the async request executor."""

from __future__ import annotations

from collections.abc import Sequence

from ..core.models import Connection
from ..core.options import Fidelity, scoped_options
from . import endpoints
from .async_executor import AsyncRequestExecutor
from .params import (
    Instant,
    build_annotations_body,
    build_query_body,
    build_search_body,
    build_tag_keys_body,
    build_tag_values_body,
)


class AsyncDatasourceService:
    """One method per protocol endpoint."""

    def __init__(self, executor: AsyncRequestExecutor) -> None:
        self._executor = executor

    async def ping(self, conn: Connection) -> None:
        with scoped_options(fidelity=Fidelity.RAW):
            await self._executor.execute(endpoints.PING, conn)

    async def search(self, conn: Connection, target: str | None = "") -> object:
        return await self._executor.execute(endpoints.SEARCH, conn, build_search_body(target))

    async def query(
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
        return await self._executor.execute(endpoints.QUERY, conn, body)

    async def annotations(self, conn: Connection, target: str, from_: Instant, to: Instant) -> object:
        body = build_annotations_body(target, from_, to)
        return await self._executor.execute(endpoints.ANNOTATIONS, conn, body)

    async def tag_keys(self, conn: Connection) -> object:
        return await self._executor.execute(endpoints.TAG_KEYS, conn, build_tag_keys_body())

    async def tag_values(self, conn: Connection, key: str) -> object:
        return await self._executor.execute(endpoints.TAG_VALUES, conn, build_tag_values_body(key))


__all__ = [
    "AsyncDatasourceService",
]
