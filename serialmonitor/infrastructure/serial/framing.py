"""Outbound framing applied at the transport edge."""

from serialmonitor.application.ports import MonitorConfigPort


class LineEndingFramer:
    """Appends the currently configured line ending to outbound text."""

    def __init__(self, config: MonitorConfigPort) -> None:
        self._config = config

    def __call__(self, text: str) -> str:
        return f"{text}{self._config.line_ending.value}"
