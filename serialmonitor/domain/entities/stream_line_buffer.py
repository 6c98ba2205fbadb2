"""Stream line buffer entity - reassembles fragments into lines."""

from dataclasses import dataclass

from ..values import LINE_DELIMITER


@dataclass
class StreamLineBuffer:
    """Accumulates stream fragments and resolves completed lines.

    Resolves at most one line per ``append`` call. Any further complete
    lines stay pending until the next call, even if that call brings no
    new data. Bursty input therefore drains with one line of latency per
    extra delimiter.
    """

    _chunk: str = ""

    @property
    def pending(self) -> str:
        """Text received but not yet resolved into a line."""
        return self._chunk

    @property
    def is_empty(self) -> bool:
        return not self._chunk

    def append(self, fragment: str) -> str | None:
        """Append a fragment and resolve the first completed line.

        Args:
            fragment: Raw stream text, any size, no alignment guarantee.

        Returns:
            The first completed line including its delimiter, or None.
        """
        self._chunk += fragment
        eol_index = self._chunk.find(LINE_DELIMITER)
        if eol_index == -1:
            return None

        split_at = eol_index + len(LINE_DELIMITER)
        line = self._chunk[:split_at]
        self._chunk = self._chunk[split_at:]
        return line

    def clear(self) -> None:
        """Drop all pending text."""
        self._chunk = ""
