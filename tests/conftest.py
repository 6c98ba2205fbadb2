"""Shared test fixtures and configuration."""

from datetime import datetime

import pytest

from serialmonitor.application.services import MonitorSession
from serialmonitor.domain import BaudRate, LineEnding, OutputLineStore, StreamLineBuffer
from serialmonitor.infrastructure.config import MonitorModel
from serialmonitor.infrastructure.serial import Emitter, HandlerSubscription

# ============= Mock Fixtures =============


class FakeClock:
    """Fake wall clock for testing timestamps."""

    def __init__(self, start: datetime | None = None):
        self._time = start or datetime(2024, 5, 17, 9, 5, 7, 42_000)

    def now(self) -> datetime:
        return self._time

    def set(self, moment: datetime) -> None:
        self._time = moment


@pytest.fixture
def fake_clock():
    """Fake clock fixed at 09:05:07.042."""
    return FakeClock()


class FakeTransport:
    """Fake serial transport for testing."""

    def __init__(self):
        self.auto_connect = False
        self.is_connected = False
        self.sent: list[str] = []
        self.disconnect_calls = 0
        self.disconnect_error: Exception | None = None
        self._fragments: Emitter[str] = Emitter()
        self._connection_changes: Emitter[bool] = Emitter()

    def on_fragment(self, handler) -> HandlerSubscription[str]:
        return self._fragments.subscribe(handler)

    def on_connection_state_changed(self, handler) -> HandlerSubscription[bool]:
        return self._connection_changes.subscribe(handler)

    def send(self, text: str) -> None:
        self.sent.append(text)

    async def disconnect(self) -> None:
        self.disconnect_calls += 1
        if self.disconnect_error is not None:
            raise self.disconnect_error
        self.set_connected(False)

    # Test helpers
    def emit_fragment(self, text: str) -> None:
        """Deliver a fragment to subscribers."""
        self._fragments.emit(text)

    def set_connected(self, connected: bool) -> None:
        """Report a connection transition to subscribers."""
        self.is_connected = connected
        self._connection_changes.emit(connected)

    @property
    def subscriber_count(self) -> int:
        return len(self._fragments) + len(self._connection_changes)


@pytest.fixture
def fake_transport():
    """Disconnected fake transport."""
    return FakeTransport()


class FakeSerial:
    """Fake pyserial handle for testing."""

    def __init__(self, port: str, baudrate: int = 9600, **kwargs):
        self.port = port
        self.baudrate = baudrate
        self.kwargs = kwargs
        self.is_open = True
        self.written: list[bytes] = []
        self.read_error: Exception | None = None
        self.write_error: Exception | None = None
        self.close_error: Exception | None = None
        self._incoming: list[bytes] = []

    def read(self, size: int = 1) -> bytes:
        if self.read_error is not None:
            raise self.read_error
        if self._incoming:
            return self._incoming.pop(0)
        return b""

    def write(self, data: bytes) -> int:
        if self.write_error is not None:
            raise self.write_error
        self.written.append(data)
        return len(data)

    def close(self) -> None:
        self.is_open = False
        if self.close_error is not None:
            raise self.close_error

    # Test helpers
    def feed(self, data: bytes) -> None:
        """Queue bytes to be returned by read()."""
        self._incoming.append(data)


class FakeSerialFactory:
    """Serial constructor that records every handle it creates."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.created: list[FakeSerial] = []

    def __call__(self, port: str, **kwargs) -> FakeSerial:
        if self.error is not None:
            raise self.error
        handle = FakeSerial(port, **kwargs)
        self.created.append(handle)
        return handle

    @property
    def last(self) -> FakeSerial:
        return self.created[-1]


@pytest.fixture
def serial_factory():
    """Factory producing fake serial handles."""
    return FakeSerialFactory()


# ============= Domain Fixtures =============


@pytest.fixture
def line_buffer():
    """Empty stream line buffer."""
    return StreamLineBuffer()


@pytest.fixture
def line_store():
    """Empty output line store."""
    return OutputLineStore()


@pytest.fixture
def monitor_model():
    """Default monitor settings."""
    return MonitorModel(
        timestamp=False,
        autoscroll=True,
        line_ending=LineEnding.NEWLINE,
        baud_rate=BaudRate.B9600,
    )


# ============= Session Fixtures =============


@pytest.fixture
def session(fake_transport, monitor_model, fake_clock):
    """Unattached monitor session over a fake transport."""
    return MonitorSession(fake_transport, monitor_model, fake_clock)


@pytest.fixture
def attached_session(session):
    """Attached monitor session, detached after the test."""
    with session:
        yield session
