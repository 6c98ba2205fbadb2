"""Line ending value object for outbound framing."""

from enum import Enum


class LineEnding(Enum):
    """Line ending appended to outbound text.

    Display-side splitting always keys on ``\\n`` and ignores this setting.
    """

    NONE = ""
    NEWLINE = "\n"
    CARRIAGE_RETURN = "\r"
    BOTH = "\r\n"

    @property
    def label(self) -> str:
        """User-facing label."""
        return _LABELS[self]

    @classmethod
    def default(cls) -> "LineEnding":
        return cls.NEWLINE

    @classmethod
    def from_name(cls, name: str) -> "LineEnding":
        """Resolve a line ending from its member name, alias or label.

        Raises:
            ValueError: If the name matches no line ending.
        """
        key = name.strip().lower()
        for ending in cls:
            if key in (ending.name.lower(), ending.label.lower()):
                return ending
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unknown line ending: {name!r}")


_LABELS = {
    LineEnding.NONE: "No Line Ending",
    LineEnding.NEWLINE: "Newline",
    LineEnding.CARRIAGE_RETURN: "Carriage Return",
    LineEnding.BOTH: "Both NL & CR",
}

_ALIASES = {
    "nl": LineEnding.NEWLINE,
    "lf": LineEnding.NEWLINE,
    "cr": LineEnding.CARRIAGE_RETURN,
    "crlf": LineEnding.BOTH,
    "none": LineEnding.NONE,
}
