"""Baud rate value object."""

from enum import IntEnum


class BaudRate(IntEnum):
    """Supported serial baud rates."""

    B300 = 300
    B1200 = 1200
    B2400 = 2400
    B4800 = 4800
    B9600 = 9600
    B19200 = 19200
    B38400 = 38400
    B57600 = 57600
    B115200 = 115200

    @property
    def label(self) -> str:
        return f"{self.value} baud"

    @classmethod
    def default(cls) -> "BaudRate":
        return cls.B9600

    @classmethod
    def from_value(cls, value: int | str) -> "BaudRate":
        """Resolve a baud rate from an integer or numeric string.

        Raises:
            ValueError: If the value is not a supported rate.
        """
        try:
            return cls(int(value))
        except (TypeError, ValueError):
            supported = ", ".join(str(rate.value) for rate in cls)
            raise ValueError(f"Unsupported baud rate: {value!r} (supported: {supported})") from None
