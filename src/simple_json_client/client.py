"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Sequence
from types import TracebackType

from .client_shared import validate_client_config
from .config import ClientConfig
from .core.errors import ClientClosedError
from .core.models import Connection
from .core.transport import SyncTransport
from .datasource.executor import RequestExecutor, RequestTransport
from .datasource.params import Instant
from .datasource.service import DatasourceService


class SimpleJsonClient:
    """Client for the Grafana Simple JSON datasource protocol.

    Every operation takes the :class:`Connection` to talk to, so a single
    client can serve several datasources. What an operation returns depends on
    the active :class:`ResponseOptions`: the raw ``httpx.Response``, the decoded
    JSON body, or (the default) the endpoint's normalized shape.
    """

    def __init__(
        self,
        *,
        config: ClientConfig | None = None,
        transport: RequestTransport | None = None,
    ) -> None:
        self._config = config or ClientConfig()
        validate_client_config(self._config)

        self._transport = transport or SyncTransport(self._config)
        self._service = DatasourceService(RequestExecutor(self._transport))
        self._closed = False

    def _ensure_open(self) -> None:
        if self._closed:
            raise ClientClosedError("SimpleJsonClient is already closed")

    def ping(self, conn: Connection) -> None:
        """Check the datasource answers ``GET /``; raises ``TransportError`` otherwise."""
        self._ensure_open()
        self._service.ping(conn)

    def search(self, conn: Connection, target: str | None = "") -> object:
        """List metric names; normalized to ``{value: text}``."""
        self._ensure_open()
        return self._service.search(conn, target)

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
        """Fetch time series; normalized to ``((SeriesContext, {ts: value}), ...)``."""
        self._ensure_open()
        return self._service.query(
            conn,
            targets,
            from_,
            to,
            interval=interval,
            max_data_points=max_data_points,
        )

    def annotations(self, conn: Connection, target: str, from_: Instant, to: Instant) -> object:
        self._ensure_open()
        return self._service.annotations(conn, target, from_, to)

    def tag_keys(self, conn: Connection) -> object:
        self._ensure_open()
        return self._service.tag_keys(conn)

    def tag_values(self, conn: Connection, key: str) -> object:
        self._ensure_open()
        return self._service.tag_values(conn, key)

    def close(self) -> None:
        if self._closed:
            return
        close = getattr(self._transport, "close", None)
        if close is not None:
            close()
        self._closed = True

    def __enter__(self) -> "SimpleJsonClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "SimpleJsonClient",
]
