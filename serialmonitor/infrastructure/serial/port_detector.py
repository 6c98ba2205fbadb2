"""Serial port detection for devices attached to this machine."""

import sys

from serial.tools import list_ports

from serialmonitor.domain import SerialPortInfo


class SerialPortDetector:
    """Detect available serial ports on the current platform."""

    def detect_ports(self) -> list[SerialPortInfo]:
        """Enumerate serial ports.

        Returns:
            Detected ports sorted by device name.
        """
        ports = [
            SerialPortInfo(
                device=port.device,
                description=port.description or "",
                hwid=port.hwid or "",
            )
            for port in list_ports.comports()
        ]
        return sorted(ports, key=lambda p: p.device)

    def get_default_port(self) -> str | None:
        """Pick the port most likely to be a development board.

        USB adapters win over built-in UARTs. Returns None if no port
        is attached.
        """
        ports = self.detect_ports()
        if not ports:
            return None

        usb_ports = [p for p in ports if p.is_usb]
        if usb_ports:
            return usb_ports[0].device

        return self._get_platform_preferred(ports).device

    def _get_platform_preferred(self, ports: list[SerialPortInfo]) -> SerialPortInfo:
        """Get the preferred non-USB port for the current platform."""
        if sys.platform == "darwin":
            # Prefer call-out devices over dial-in on macOS
            for port in ports:
                if port.device.startswith("/dev/cu."):
                    return port
        elif sys.platform != "win32":
            for port in ports:
                if port.device.startswith(("/dev/ttyACM", "/dev/ttyUSB")):
                    return port
        return ports[0]
