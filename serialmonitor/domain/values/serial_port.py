"""Serial port description value object."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SerialPortInfo:
    """A serial device available on this machine."""

    device: str
    description: str = ""
    hwid: str = ""

    @property
    def is_usb(self) -> bool:
        """Check if the port is backed by a USB adapter."""
        return "USB" in self.hwid.upper() or "USB" in self.description.upper()
