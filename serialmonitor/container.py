"""Dependency container - holds all wired dependencies."""

from dataclasses import dataclass

from serialmonitor.application.services import MonitorSession
from serialmonitor.config import Config
from serialmonitor.infrastructure.config import MonitorModel
from serialmonitor.infrastructure.serial import SerialTransport


@dataclass(frozen=True)
class Container:
    """Immutable dependency container.

    All dependencies are wired at startup and cannot be modified.
    """

    # Services
    session: MonitorSession

    # Infrastructure
    transport: SerialTransport
    model: MonitorModel

    # Configuration
    config: Config
    port: str

    @property
    def view_height(self) -> int:
        return self.config.display.view_height
