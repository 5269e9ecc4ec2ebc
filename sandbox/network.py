"""
Outbound network reachability probe.

The request runs on a worker thread and races a timer. Whichever of
response, transport error or timeout fires first settles the task; the others
are discarded. On timeout the in-flight connection is closed.
"""

from __future__ import annotations

import http.client
import logging
import threading
from collections.abc import Callable
from typing import Protocol
from urllib.parse import urlsplit

from sandbox.outcomes import Outcome

logger = logging.getLogger(__name__)

DEFAULT_NETWORK_URL = "https://www.google.com/"
DEFAULT_TIMEOUT_SECONDS = 5.0


class _Response(Protocol):
    status: int


class _Connection(Protocol):
    def request(self, method: str, url: str) -> None: ...

    def getresponse(self) -> _Response: ...

    def close(self) -> None: ...


ConnectionFactory = Callable[[str, int | None, float], _Connection]
CompletionCallback = Callable[[str, Outcome], None]


def _default_connection_factory(host: str, port: int | None, timeout: float) -> _Connection:
    return http.client.HTTPSConnection(host, port, timeout=timeout)


def _plain_connection_factory(host: str, port: int | None, timeout: float) -> _Connection:
    return http.client.HTTPConnection(host, port, timeout=timeout)


def _format_error(exc: BaseException) -> str:
    return str(exc) or exc.__class__.__name__


class NetworkTask:
    """One in-flight request; settles exactly once."""

    name: str
    url: str
    timeout_seconds: float

    def __init__(
        self,
        name: str,
        url: str,
        timeout_seconds: float,
        on_complete: CompletionCallback | None = None,
        connection_factory: ConnectionFactory | None = None,
    ) -> None:
        self.name = name
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._on_complete = on_complete
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.hostname:
            raise ValueError(f"Unsupported URL for network probe: {url}")
        self._host = parts.hostname
        self._port = parts.port
        self._path = parts.path or "/"
        if parts.query:
            self._path = f"{self._path}?{parts.query}"
        if connection_factory is not None:
            self._connection_factory = connection_factory
        elif parts.scheme == "https":
            self._connection_factory = _default_connection_factory
        else:
            self._connection_factory = _plain_connection_factory

        self._lock = threading.Lock()
        self._settled = threading.Event()
        self._outcome: Outcome | None = None
        self._connection: _Connection | None = None
        self._worker = threading.Thread(target=self._request, name=f"probe-{name}", daemon=True)
        self._timer = threading.Timer(timeout_seconds, self._expire)
        self._timer.daemon = True

    @property
    def outcome(self) -> Outcome | None:
        return self._outcome

    @property
    def done(self) -> bool:
        return self._settled.is_set()

    def start(self) -> "NetworkTask":
        self._timer.start()
        self._worker.start()
        return self

    def wait(self, timeout: float | None = None) -> Outcome | None:
        """Block until the task has settled (or ``timeout`` elapses)."""
        _ = self._settled.wait(timeout)
        return self._outcome

    def _settle(self, outcome: Outcome) -> bool:
        with self._lock:
            if self._outcome is not None:
                return False
            self._outcome = outcome
        self._timer.cancel()
        logger.debug("network probe %s settled: %s", self.name, outcome.kind.value)
        try:
            if self._on_complete is not None:
                self._on_complete(self.name, outcome)
        finally:
            self._settled.set()
        return True

    def _request(self) -> None:
        try:
            connection = self._connection_factory(self._host, self._port, self.timeout_seconds)
        except Exception as exc:  # noqa: BLE001 - reported as the probe outcome
            _ = self._settle(Outcome.error(f"Network error: {_format_error(exc)}", exc))
            return
        with self._lock:
            self._connection = connection
            expired = self._outcome is not None
        if expired:
            connection.close()
            return
        try:
            connection.request("GET", self._path)
            response = connection.getresponse()
            status = int(response.status)
        except Exception as exc:  # noqa: BLE001 - reported as the probe outcome
            _ = self._settle(Outcome.error(f"Network error: {_format_error(exc)}", exc))
        else:
            _ = self._settle(Outcome.success(f"Network access: HTTP {status}", status_code=status))
        finally:
            connection.close()

    def _expire(self) -> None:
        timeout_ms = int(self.timeout_seconds * 1000)
        if not self._settle(Outcome.timeout(f"Network timeout after {timeout_ms}ms")):
            return
        with self._lock:
            connection = self._connection
        if connection is not None:
            # Unblocks the worker; its late result loses the race in _settle.
            connection.close()


class NetworkProbe:
    """Fire-and-forget probe: started by the harness, never awaited by it."""

    name: str
    url: str
    timeout_seconds: float

    def __init__(
        self,
        url: str = DEFAULT_NETWORK_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        connection_factory: ConnectionFactory | None = None,
    ) -> None:
        self.name = "network"
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._connection_factory = connection_factory

    def start(self, on_complete: CompletionCallback | None = None) -> NetworkTask:
        task = NetworkTask(
            self.name,
            self.url,
            self.timeout_seconds,
            on_complete=on_complete,
            connection_factory=self._connection_factory,
        )
        return task.start()

    def __repr__(self) -> str:
        return f"<NetworkProbe {self.url!r}>"
