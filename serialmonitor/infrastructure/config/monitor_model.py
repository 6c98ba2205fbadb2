"""In-memory monitor settings shared by the session and the transport."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from serialmonitor.domain import BaudRate, LineEnding

if TYPE_CHECKING:
    from serialmonitor.config import Config


@dataclass
class MonitorModel:
    """Mutable monitor settings for one running monitor.

    Changes live for the process only.
    """

    timestamp: bool = False
    autoscroll: bool = True
    line_ending: LineEnding = field(default_factory=LineEnding.default)
    baud_rate: BaudRate = field(default_factory=BaudRate.default)

    @classmethod
    def from_config(cls, config: "Config") -> "MonitorModel":
        """Seed settings from validated configuration."""
        return cls(
            timestamp=config.display.timestamp,
            autoscroll=config.display.autoscroll,
            line_ending=config.display.line_ending,
            baud_rate=config.serial.baud_rate,
        )
