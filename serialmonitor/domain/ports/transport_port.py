"""Transport port - interface for the serial link collaborator."""

from collections.abc import Callable
from typing import Protocol

FragmentHandler = Callable[[str], None]
ConnectionHandler = Callable[[bool], None]


class TransportError(Exception):
    """Raised when the transport fails to carry out a request."""


class Subscription(Protocol):
    """Handle returned by an event registration."""

    def dispose(self) -> None:
        """Stop delivering events to the handler. Safe to call twice."""
        ...


class TransportPort(Protocol):
    """Protocol for the serial transport.

    Infrastructure layer implements this with an actual device link.
    """

    auto_connect: bool

    @property
    def is_connected(self) -> bool:
        """Check if the device link is open."""
        ...

    def on_fragment(self, handler: FragmentHandler) -> Subscription:
        """Subscribe to raw inbound text fragments."""
        ...

    def on_connection_state_changed(self, handler: ConnectionHandler) -> Subscription:
        """Subscribe to connect/disconnect transitions."""
        ...

    def send(self, text: str) -> None:
        """Write text to the device (fire-and-forget)."""
        ...

    async def disconnect(self) -> None:
        """Close the device link.

        Raises:
            TransportError: If the link could not be closed.
        """
        ...
