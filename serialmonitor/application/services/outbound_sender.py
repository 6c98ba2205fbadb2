"""Outbound sender - user text and link settings toward the device."""

import logging

from serialmonitor.domain import BaudRate, LineEnding, TransportPort

from ..ports import MonitorConfigPort

logger = logging.getLogger(__name__)


class OutboundSender:
    """Forwards user input and settings changes to the transport.

    Text is sent verbatim. Line-ending framing, if any, belongs to the
    transport edge.
    """

    def __init__(self, transport: TransportPort, config: MonitorConfigPort) -> None:
        self._transport = transport
        self._config = config

    def send(self, text: str) -> None:
        """Forward text to the transport unchanged."""
        logger.debug("Sending %d chars", len(text))
        self._transport.send(text)

    def select_line_ending(self, line_ending: LineEnding) -> bool:
        """Apply a line ending immediately, leaving the connection alone.

        Returns:
            True if the setting changed.
        """
        if self._config.line_ending == line_ending:
            return False
        self._config.line_ending = line_ending
        logger.info("Line ending set to %s", line_ending.label)
        return True

    async def select_baud_rate(self, baud_rate: BaudRate) -> bool:
        """Disconnect the active link, then store the new baud rate.

        Raises:
            TransportError: If the disconnect fails. The stored baud
                rate is left unchanged.

        Returns:
            True if the setting changed.
        """
        await self._transport.disconnect()
        if self._config.baud_rate == baud_rate:
            return False
        self._config.baud_rate = baud_rate
        logger.info("Baud rate set to %s", baud_rate.label)
        return True
