"""Domain ports - interfaces for infrastructure to implement."""

from .transport_port import (
    ConnectionHandler,
    FragmentHandler,
    Subscription,
    TransportError,
    TransportPort,
)

__all__ = [
    "TransportPort",
    "TransportError",
    "Subscription",
    "FragmentHandler",
    "ConnectionHandler",
]
