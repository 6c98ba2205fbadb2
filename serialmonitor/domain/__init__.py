"""Pure domain layer - no infrastructure dependencies."""

# Entities
from .entities import OutputLineStore, StreamLineBuffer

# Ports
from .ports import (
    ConnectionHandler,
    FragmentHandler,
    Subscription,
    TransportError,
    TransportPort,
)

# Services
from .services import (
    TIMESTAMP_SEPARATOR,
    AutoScrollPolicy,
    Clock,
    ConnectionLifecycleController,
    SystemClock,
    TimestampAnnotator,
    format_timestamp,
)

# Value Objects
from .values import (
    LINE_DELIMITER,
    BaudRate,
    ConnectionState,
    Line,
    LineEnding,
    SerialPortInfo,
)

__all__ = [
    # Values
    "BaudRate",
    "ConnectionState",
    "Line",
    "LINE_DELIMITER",
    "LineEnding",
    "SerialPortInfo",
    # Entities
    "StreamLineBuffer",
    "OutputLineStore",
    # Services
    "TimestampAnnotator",
    "Clock",
    "SystemClock",
    "TIMESTAMP_SEPARATOR",
    "format_timestamp",
    "AutoScrollPolicy",
    "ConnectionLifecycleController",
    # Ports
    "TransportPort",
    "TransportError",
    "Subscription",
    "FragmentHandler",
    "ConnectionHandler",
]
