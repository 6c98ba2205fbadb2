"""Output line store entity - committed display lines."""

from dataclasses import dataclass, field

from ..values import Line


@dataclass
class OutputLineStore:
    """Ordered, append-only sequence of display lines.

    Insertion order is arrival order. Lines are only ever removed all at
    once by ``clear``.
    """

    _lines: list[Line] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self._lines

    @property
    def last(self) -> Line | None:
        """Most recently appended line."""
        return self._lines[-1] if self._lines else None

    def push(self, line: Line) -> None:
        """Append a committed line."""
        self._lines.append(line)

    def snapshot(self) -> tuple[Line, ...]:
        """Get committed lines in arrival order (read-only copy)."""
        return tuple(self._lines)

    def clear(self) -> None:
        """Drop all lines."""
        self._lines = []

    def __len__(self) -> int:
        return len(self._lines)
