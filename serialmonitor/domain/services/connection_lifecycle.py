"""Connection lifecycle controller - ties buffered state to the link."""

import logging

from ..entities import OutputLineStore, StreamLineBuffer
from ..ports import TransportPort
from ..values import ConnectionState

logger = logging.getLogger(__name__)


class ConnectionLifecycleController:
    """Resets buffered display state on disconnect and session attach.

    Also forwards the session's visibility to the transport as the
    auto-connect intent.
    """

    def __init__(
        self,
        transport: TransportPort,
        line_buffer: StreamLineBuffer,
        line_store: OutputLineStore,
    ) -> None:
        self._transport = transport
        self._line_buffer = line_buffer
        self._line_store = line_store
        self._state = ConnectionState.DISCONNECTED

    @property
    def state(self) -> ConnectionState:
        return self._state

    def on_connection_changed(self, connected: bool) -> bool:
        """Apply a connection transition.

        Every transition to DISCONNECTED clears, including repeated ones.

        Returns:
            True if the display state was cleared.
        """
        new_state = ConnectionState.from_flag(connected)
        if new_state != self._state:
            logger.info("Connection state %s -> %s", self._state.value, new_state.value)
        self._state = new_state

        if new_state is ConnectionState.DISCONNECTED:
            self.reset()
            return True
        return False

    def on_attach(self) -> None:
        """Start a display session with a clean view, then request auto-connect.

        Transitions missed while detached are not replayed, so the state is
        resynced from the transport.
        """
        self.reset()
        self._state = ConnectionState.from_flag(self._transport.is_connected)
        self._transport.auto_connect = True

    def on_detach(self) -> None:
        """Withdraw the auto-connect intent."""
        self._transport.auto_connect = False

    def reset(self) -> None:
        """Clear pending text and committed lines together."""
        self._line_buffer.clear()
        self._line_store.clear()
        logger.debug("Display state cleared")
