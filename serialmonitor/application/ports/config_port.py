"""Configuration port - interface for monitor settings access."""

from typing import Protocol

from serialmonitor.domain import BaudRate, LineEnding


class MonitorConfigPort(Protocol):
    """Protocol for the monitor settings read by a display session.

    Infrastructure layer implements this with the user's configuration.
    Values are validated before they get here.
    """

    timestamp: bool
    autoscroll: bool
    line_ending: LineEnding
    baud_rate: BaudRate
