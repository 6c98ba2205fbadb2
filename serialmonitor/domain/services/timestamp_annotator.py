"""Timestamp annotation for completed lines."""

from datetime import datetime
from typing import Protocol

from ..values import Line

TIMESTAMP_SEPARATOR = " -> "


class Clock(Protocol):
    """Protocol for wall-clock time source."""

    def now(self) -> datetime:
        """Get current local time."""
        ...


class SystemClock:
    """Clock backed by the local system time."""

    def now(self) -> datetime:
        return datetime.now()


def format_timestamp(moment: datetime) -> str:
    """Format as ``H:M:ss.l`` (unpadded hours and minutes)."""
    millis = moment.microsecond // 1000
    return f"{moment.hour}:{moment.minute}:{moment.second:02d}.{millis:03d}"


class TimestampAnnotator:
    """Turns raw line text into an immutable display line.

    The capture time is read once, when the line is finalized, so later
    renders always show the same timestamp.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()

    def annotate(self, raw: str, enabled: bool) -> Line:
        """Build a Line, prefixed with its capture time when enabled."""
        captured_at = self._clock.now()
        if not enabled:
            return Line(raw=raw, captured_at=captured_at)
        prefix = f"{format_timestamp(captured_at)}{TIMESTAMP_SEPARATOR}"
        return Line(raw=raw, timestamp_prefix=prefix, captured_at=captured_at)
