"""Composition root - the ONLY place where dependencies are wired."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import serial

from serialmonitor.application.services import MonitorSession
from serialmonitor.config import load_config
from serialmonitor.container import Container
from serialmonitor.domain import Clock
from serialmonitor.infrastructure.config import DEFAULT_CONFIG_PATH, MonitorModel
from serialmonitor.infrastructure.serial import (
    LineEndingFramer,
    SerialPortDetector,
    SerialTransport,
)

logger = logging.getLogger(__name__)


class NoSerialPortError(RuntimeError):
    """Raised when no port is configured and none can be detected."""


def create_container(
    config_path: Path | str = DEFAULT_CONFIG_PATH,
    overrides: dict[str, dict[str, Any]] | None = None,
    clock: Clock | None = None,
    port_detector: SerialPortDetector | None = None,
    serial_factory: Callable[..., serial.Serial] = serial.Serial,
) -> Container:
    """Create the dependency container with all wired dependencies.

    This is the composition root - the single place where all
    dependencies are created and wired together.

    Args:
        config_path: Path to config file.
        overrides: Per-section values that win over the file
            (e.g. ``{"serial": {"port": "COM3"}}``).
        clock: Time source for line timestamps.
        port_detector: Detector used when no port is configured.
        serial_factory: Constructor for the pyserial handle.

    Returns:
        Fully wired dependency container.

    Raises:
        NoSerialPortError: If no port is configured or detected.
    """
    # Load and validate configuration
    config = load_config(config_path, overrides)

    # Resolve the device
    port = config.serial.port
    if not port:
        detector = port_detector or SerialPortDetector()
        port = detector.get_default_port() or ""
        if not port:
            raise NoSerialPortError("No serial port configured and none detected")
        logger.info("Auto-detected serial port %s", port)

    # Runtime settings shared by session and transport
    model = MonitorModel.from_config(config)

    # Line ending framing lives at the transport edge
    framer = LineEndingFramer(model) if config.serial.append_line_ending else None

    transport = SerialTransport(
        port,
        lambda: model.baud_rate,
        encoding=config.serial.encoding,
        framer=framer,
        poll_interval=config.serial.poll_interval,
        reconnect_interval=config.serial.reconnect_interval,
        serial_factory=serial_factory,
    )

    session = MonitorSession(transport, model, clock)

    return Container(
        session=session,
        transport=transport,
        model=model,
        config=config,
        port=port,
    )
