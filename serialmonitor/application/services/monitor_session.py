"""Monitor session - display state for one attached serial monitor view."""

import logging
from collections.abc import Callable
from contextlib import ExitStack

from serialmonitor.domain import (
    AutoScrollPolicy,
    BaudRate,
    Clock,
    ConnectionLifecycleController,
    ConnectionState,
    Line,
    LineEnding,
    OutputLineStore,
    StreamLineBuffer,
    TimestampAnnotator,
    TransportPort,
)

from ..ports import MonitorConfigPort
from .outbound_sender import OutboundSender

logger = logging.getLogger(__name__)

ChangeListener = Callable[[], None]


class MonitorSession:
    """Display session for a serial monitor.

    Owns the pending stream text, the committed lines and the transport
    subscriptions for the lifetime between ``attach`` and ``detach``.
    Mutations notify listeners so the host decides when to repaint.

    Handlers run to completion on the event loop, so a disconnect that
    arrives between two fragments fully resets state before the next
    fragment is buffered.
    """

    def __init__(
        self,
        transport: TransportPort,
        config: MonitorConfigPort,
        clock: Clock | None = None,
    ) -> None:
        self._transport = transport
        self._config = config
        self._line_buffer = StreamLineBuffer()
        self._line_store = OutputLineStore()
        self._annotator = TimestampAnnotator(clock)
        self._auto_scroll = AutoScrollPolicy()
        self._lifecycle = ConnectionLifecycleController(
            transport, self._line_buffer, self._line_store
        )
        self._sender = OutboundSender(transport, config)
        self._listeners: list[ChangeListener] = []
        self._subscriptions: ExitStack | None = None

    # ---- Lifecycle ----

    @property
    def is_attached(self) -> bool:
        return self._subscriptions is not None

    @property
    def connection_state(self) -> ConnectionState:
        return self._lifecycle.state

    def attach(self) -> None:
        """Subscribe to the transport and start from a clean view."""
        if self._subscriptions is not None:
            return

        with ExitStack() as stack:
            stack.callback(self._transport.on_fragment(self._handle_fragment).dispose)
            stack.callback(
                self._transport.on_connection_state_changed(self._handle_connection_changed).dispose
            )
            self._lifecycle.on_attach()
            self._subscriptions = stack.pop_all()

        self._auto_scroll.mark_dirty()
        logger.info("Monitor session attached")
        self._notify()

    def detach(self) -> None:
        """Withdraw auto-connect and release every subscription."""
        if self._subscriptions is None:
            return

        subscriptions, self._subscriptions = self._subscriptions, None
        with subscriptions:
            self._lifecycle.on_detach()
        logger.info("Monitor session detached")

    def __enter__(self) -> "MonitorSession":
        self.attach()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.detach()

    # ---- Observer contract ----

    def subscribe(self, listener: ChangeListener) -> Callable[[], None]:
        """Register a change listener.

        Returns:
            Callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener()

    # ---- Renderer queries ----

    def get_display_lines(self) -> tuple[Line, ...]:
        """Get committed lines in arrival order."""
        return self._line_store.snapshot()

    def should_auto_scroll(self) -> bool:
        """Ask once per render pass whether to reveal the newest line."""
        return self._auto_scroll.should_scroll(self._config.autoscroll)

    # ---- User intents ----

    def on_user_send(self, text: str) -> None:
        """Send user-entered text to the device."""
        self._sender.send(text)

    def on_line_ending_selected(self, line_ending: LineEnding) -> bool:
        changed = self._sender.select_line_ending(line_ending)
        if changed:
            self._notify()
        return changed

    async def on_baud_rate_selected(self, baud_rate: BaudRate) -> bool:
        """Disconnect, then apply the new baud rate.

        Raises:
            TransportError: Propagated from the transport disconnect.
        """
        changed = await self._sender.select_baud_rate(baud_rate)
        if changed:
            self._notify()
        return changed

    def on_timestamp_toggled(self, enabled: bool) -> bool:
        """Set timestamping for lines completed from now on."""
        if self._config.timestamp == enabled:
            return False
        self._config.timestamp = enabled
        self._notify()
        return True

    def on_autoscroll_toggled(self, enabled: bool) -> bool:
        if self._config.autoscroll == enabled:
            return False
        self._config.autoscroll = enabled
        if enabled:
            self._auto_scroll.mark_dirty()
        self._notify()
        return True

    def clear_console(self) -> bool:
        """Drop pending text and every committed line."""
        self._lifecycle.reset()
        self._auto_scroll.mark_dirty()
        self._notify()
        return True

    # ---- Transport events ----

    def _handle_fragment(self, fragment: str) -> bool:
        if self._subscriptions is None:
            # Delivered after detach
            return False

        raw = self._line_buffer.append(fragment)
        if raw is None:
            return False

        self._line_store.push(self._annotator.annotate(raw, self._config.timestamp))
        self._auto_scroll.mark_dirty()
        self._notify()
        return True

    def _handle_connection_changed(self, connected: bool) -> bool:
        if self._subscriptions is None:
            return False

        cleared = self._lifecycle.on_connection_changed(connected)
        if cleared:
            self._auto_scroll.mark_dirty()
        self._notify()
        return cleared
