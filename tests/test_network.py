"""Tests for the background network probe."""

import threading
from types import SimpleNamespace

import pytest

from sandbox.network import DEFAULT_TIMEOUT_SECONDS, NetworkProbe, NetworkTask
from sandbox.outcomes import OutcomeKind


class FakeConnection:
    """Stands in for http.client connections."""

    def __init__(self, status=200, error=None, block=False):
        self.status = status
        self.error = error
        self.block = block
        self.requests = []
        self.closed = threading.Event()

    def request(self, method, url):
        self.requests.append((method, url))
        if self.error is not None:
            raise self.error

    def getresponse(self):
        if self.block:
            _ = self.closed.wait(5)
            raise OSError("connection closed")
        return SimpleNamespace(status=self.status)

    def close(self):
        self.closed.set()


def _factory(connection, calls=None):
    def make(host, port, timeout):
        if calls is not None:
            calls.append((host, port, timeout))
        return connection

    return make


def _collect():
    received = []

    def on_complete(name, outcome):
        received.append((name, outcome))

    return received, on_complete


def test_default_timeout_is_five_seconds():
    assert DEFAULT_TIMEOUT_SECONDS == 5.0


def test_response_settles_success_with_status_code():
    connection = FakeConnection(status=204)
    calls = []
    received, on_complete = _collect()
    probe = NetworkProbe(
        "https://example.test/probe?x=1",
        timeout_seconds=2.0,
        connection_factory=_factory(connection, calls),
    )

    task = probe.start(on_complete)
    outcome = task.wait(2)

    assert outcome is not None
    assert outcome.kind == OutcomeKind.SUCCESS
    assert outcome.status_code == 204
    assert outcome.message == "Network access: HTTP 204"
    assert calls == [("example.test", None, 2.0)]
    assert connection.requests == [("GET", "/probe?x=1")]
    assert received == [("network", outcome)]


def test_transport_error_settles_error():
    connection = FakeConnection(error=ConnectionRefusedError("connection refused"))
    received, on_complete = _collect()
    probe = NetworkProbe("https://example.test", connection_factory=_factory(connection))

    outcome = probe.start(on_complete).wait(2)

    assert outcome is not None
    assert outcome.kind == OutcomeKind.ERROR
    assert outcome.message == "Network error: connection refused"
    assert outcome.error_type == "ConnectionRefusedError"
    assert len(received) == 1
    assert connection.closed.is_set()


def test_factory_failure_settles_error():
    def broken(host, port, timeout):
        raise OSError("no route")

    outcome = NetworkProbe("https://example.test", connection_factory=broken).start().wait(2)

    assert outcome is not None
    assert outcome.kind == OutcomeKind.ERROR
    assert "no route" in outcome.message


def test_timeout_cancels_request_and_fires_once():
    connection = FakeConnection(block=True)
    received, on_complete = _collect()
    task = NetworkTask(
        "network",
        "https://example.test",
        timeout_seconds=0.05,
        on_complete=on_complete,
        connection_factory=_factory(connection),
    ).start()

    outcome = task.wait(2)
    task._worker.join(2)

    assert outcome is not None
    assert outcome.kind == OutcomeKind.TIMEOUT
    assert outcome.message == "Network timeout after 50ms"
    assert connection.closed.is_set()
    # The worker's late OSError loses the race.
    assert len(received) == 1
    assert task.outcome is outcome


def test_exactly_one_outcome_per_run():
    for connection in (
        FakeConnection(status=200),
        FakeConnection(error=OSError("reset")),
        FakeConnection(block=True),
    ):
        received, on_complete = _collect()
        task = NetworkTask(
            "network",
            "https://example.test",
            timeout_seconds=0.1,
            on_complete=on_complete,
            connection_factory=_factory(connection),
        ).start()
        _ = task.wait(2)
        task._worker.join(2)
        assert task.done
        assert len(received) == 1


def test_unsupported_url_rejected():
    with pytest.raises(ValueError):
        _ = NetworkTask("network", "ftp://example.test", timeout_seconds=1.0)
