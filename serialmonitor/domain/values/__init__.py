"""Domain value objects - immutable data structures."""

from .baud_rate import BaudRate
from .connection_state import ConnectionState
from .line import LINE_DELIMITER, Line
from .line_ending import LineEnding
from .serial_port import SerialPortInfo

__all__ = [
    "BaudRate",
    "ConnectionState",
    "Line",
    "LINE_DELIMITER",
    "LineEnding",
    "SerialPortInfo",
]
