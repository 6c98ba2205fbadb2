"""pyserial-backed transport for the serial monitor."""

import asyncio
import codecs
import logging
from collections.abc import Callable
from contextlib import suppress

import serial

from serialmonitor.domain import (
    ConnectionHandler,
    FragmentHandler,
    TransportError,
)

from .events import Emitter, HandlerSubscription

logger = logging.getLogger(__name__)

# Constants
DEFAULT_POLL_INTERVAL = 0.01  # ~100Hz
DEFAULT_RECONNECT_INTERVAL = 1.0  # seconds
DEFAULT_WRITE_TIMEOUT = 1.0  # seconds
READ_CHUNK_SIZE = 4096


class SerialTransport:
    """Serial device link driven by an asyncio poll loop.

    The port is opened by ``run`` whenever ``auto_connect`` is set and no
    link is open, using the baud rate current at that moment. After a
    disconnect the next open picks up a changed baud rate.
    """

    def __init__(
        self,
        port: str,
        baud_rate_provider: Callable[[], int],
        *,
        encoding: str = "utf-8",
        framer: Callable[[str], str] | None = None,
        poll_interval: float = DEFAULT_POLL_INTERVAL,
        reconnect_interval: float = DEFAULT_RECONNECT_INTERVAL,
        serial_factory: Callable[..., serial.Serial] = serial.Serial,
    ) -> None:
        self._port = port
        self._baud_rate_provider = baud_rate_provider
        self._encoding = encoding
        self._framer = framer
        self._poll_interval = poll_interval
        self._reconnect_interval = reconnect_interval
        self._serial_factory = serial_factory

        self._auto_connect = False
        self._handle: serial.Serial | None = None
        self._decoder: codecs.IncrementalDecoder | None = None
        self._running = False
        self._fragments: Emitter[str] = Emitter()
        self._connection_changes: Emitter[bool] = Emitter()

    @property
    def port(self) -> str:
        return self._port

    @property
    def is_connected(self) -> bool:
        return self._handle is not None

    @property
    def auto_connect(self) -> bool:
        return self._auto_connect

    @auto_connect.setter
    def auto_connect(self, value: bool) -> None:
        if value != self._auto_connect:
            logger.debug("Auto-connect %s port=%s", "enabled" if value else "disabled", self._port)
        self._auto_connect = value

    # ---- Subscriptions ----

    def on_fragment(self, handler: FragmentHandler) -> HandlerSubscription[str]:
        return self._fragments.subscribe(handler)

    def on_connection_state_changed(self, handler: ConnectionHandler) -> HandlerSubscription[bool]:
        return self._connection_changes.subscribe(handler)

    # ---- Link control ----

    def open(self) -> bool:
        """Open the device link at the current baud rate.

        Returns:
            True if the link is open after the call.
        """
        if self._handle is not None:
            return True

        baud_rate = int(self._baud_rate_provider())
        try:
            handle = self._serial_factory(
                self._port,
                baudrate=baud_rate,
                timeout=0,
                write_timeout=DEFAULT_WRITE_TIMEOUT,
            )
        except (serial.SerialException, OSError) as e:
            logger.warning("Failed to open port=%s baud=%d: %s", self._port, baud_rate, e)
            return False

        self._handle = handle
        self._decoder = codecs.getincrementaldecoder(self._encoding)(errors="replace")
        logger.info("Connected port=%s baud=%d", self._port, baud_rate)
        self._connection_changes.emit(True)
        return True

    async def disconnect(self) -> None:
        """Close the device link.

        Raises:
            TransportError: If the port fails to close. The link is
                considered down either way.
        """
        handle = self._handle
        if handle is None:
            return

        self._handle = None
        self._decoder = None
        try:
            handle.close()
        except (serial.SerialException, OSError) as e:
            raise TransportError(f"Failed to close {self._port}: {e}") from e
        finally:
            logger.info("Disconnected port=%s", self._port)
            self._connection_changes.emit(False)

    def _drop_link(self, lost: bool = True) -> None:
        """Tear down the link without raising."""
        handle, self._handle = self._handle, None
        self._decoder = None
        if handle is None:
            return
        with suppress(serial.SerialException, OSError):
            handle.close()
        if lost:
            logger.warning("Connection lost port=%s", self._port)
        else:
            logger.info("Disconnected port=%s", self._port)
        self._connection_changes.emit(False)

    # ---- I/O ----

    def send(self, text: str) -> None:
        """Write text to the device, framed at this edge if configured."""
        if self._handle is None:
            logger.warning("Dropping send while disconnected port=%s chars=%d", self._port, len(text))
            return

        payload = self._framer(text) if self._framer else text
        try:
            self._handle.write(payload.encode(self._encoding))
        except (serial.SerialException, OSError) as e:
            logger.error("Serial write error port=%s: %s", self._port, e)
            self._drop_link()

    def poll(self) -> str:
        """Read whatever bytes are available and emit them as a fragment.

        Returns:
            The decoded fragment, empty if nothing arrived.
        """
        if self._handle is None or self._decoder is None:
            return ""

        try:
            data = self._handle.read(READ_CHUNK_SIZE)
        except (serial.SerialException, OSError) as e:
            logger.error("Serial read error port=%s: %s", self._port, e)
            self._drop_link()
            return ""

        if not data:
            return ""

        text = self._decoder.decode(data)
        if text:
            self._fragments.emit(text)
        return text

    async def run(self) -> None:
        """Poll the device until ``stop`` is called."""
        self._running = True
        try:
            while self._running:
                if self._handle is None and self._auto_connect:
                    if not self.open():
                        await asyncio.sleep(self._reconnect_interval)
                        continue

                if self._handle is not None:
                    self.poll()

                await asyncio.sleep(self._poll_interval)
        finally:
            self._running = False
            self._drop_link(lost=False)

    def stop(self) -> None:
        """Ask the poll loop to exit after its current iteration."""
        self._running = False
