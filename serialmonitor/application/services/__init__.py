"""Application services - use case implementations."""

from .monitor_session import ChangeListener, MonitorSession
from .outbound_sender import OutboundSender

__all__ = [
    "ChangeListener",
    "MonitorSession",
    "OutboundSender",
]
