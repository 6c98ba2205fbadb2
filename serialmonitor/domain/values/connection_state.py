"""Connection state value object."""

from enum import Enum


class ConnectionState(Enum):
    """Transport connection state as seen by the display session."""

    CONNECTED = "connected"
    DISCONNECTED = "disconnected"

    @classmethod
    def from_flag(cls, connected: bool) -> "ConnectionState":
        return cls.CONNECTED if connected else cls.DISCONNECTED
