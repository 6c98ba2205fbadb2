"""Display line value object."""

from dataclasses import dataclass
from datetime import datetime

# Delimiter for splitting the inbound stream into display lines
LINE_DELIMITER = "\n"


@dataclass(frozen=True, slots=True)
class Line:
    """A completed display line (value object).

    ``raw`` keeps the trailing delimiter exactly as it arrived.
    """

    raw: str
    timestamp_prefix: str | None = None
    captured_at: datetime | None = None

    @property
    def display_text(self) -> str:
        """Text to paint, including the timestamp prefix if present."""
        if self.timestamp_prefix is None:
            return self.raw
        return f"{self.timestamp_prefix}{self.raw}"

    def __str__(self) -> str:
        return self.display_text
