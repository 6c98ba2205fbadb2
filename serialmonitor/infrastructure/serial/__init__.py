"""Serial infrastructure - pyserial transport and port detection."""

from .events import Emitter, HandlerSubscription
from .framing import LineEndingFramer
from .port_detector import SerialPortDetector
from .serial_transport import SerialTransport

__all__ = [
    "Emitter",
    "HandlerSubscription",
    "LineEndingFramer",
    "SerialPortDetector",
    "SerialTransport",
]
