"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType

from .client_shared import validate_client_config
from .config import ClientConfig
from .core.async_transport import AsyncTransport
from .core.errors import ClientClosedError
from .core.models import Connection
from .datasource.async_executor import AsyncRequestExecutor, AsyncRequestTransport
from .datasource.async_service import AsyncDatasourceService
from .datasource.params import Instant


class AsyncSimpleJsonClient:
    """Async counterpart of :class:`SimpleJsonClient`."""

    def __init__(
        self,
        *,
        config: ClientConfig | None = None,
        transport: AsyncRequestTransport | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        validate_client_config(self._config)

        self._transport = transport or AsyncTransport(self._config)
        self._service = AsyncDatasourceService(AsyncRequestExecutor(self._transport))
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise ClientClosedError("AsyncSimpleJsonClient is already closed")

    async def ping(self, conn: Connection) -> None:
        self._ensure_open()
        await self._service.ping(conn)

    async def search(self, conn: Connection, target: str | None = "") -> object:
        self._ensure_open()
        return await self._service.search(conn, target)

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
        self._ensure_open()
        return await self._service.query(
            conn,
            targets,
            from_,
            to,
            interval=interval,
            max_data_points=max_data_points,
        )

    async def annotations(
        self,
        conn: Connection,
        target: str,
        from_: Instant,
        to: Instant,
    ) -> object:
        self._ensure_open()
        return await self._service.annotations(conn, target, from_, to)

    async def tag_keys(self, conn: Connection) -> object:
        self._ensure_open()
        return await self._service.tag_keys(conn)

    async def tag_values(self, conn: Connection, key: str) -> object:
        self._ensure_open()
        return await self._service.tag_values(conn, key)

    async def close(self) -> None:
        if self._closed:
            return
        close = getattr(self._transport, "close", None)
        if close is not None:
            await close()
        self._closed = True

    async def __aenter__(self) -> "AsyncSimpleJsonClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncSimpleJsonClient",
]
