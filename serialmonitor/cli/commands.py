"""Interactive input handling for the running monitor."""

from serialmonitor.application.services import MonitorSession
from serialmonitor.domain import BaudRate, LineEnding

COMMAND_PREFIX = "/"

_SWITCH_VALUES = {
    "on": True,
    "true": True,
    "yes": True,
    "1": True,
    "off": False,
    "false": False,
    "no": False,
    "0": False,
}


class CommandError(ValueError):
    """Raised for unknown commands or bad command arguments."""


def parse_switch(value: str) -> bool:
    """Parse an on/off argument."""
    try:
        return _SWITCH_VALUES[value.strip().lower()]
    except KeyError:
        raise CommandError(f"Expected on or off, got {value!r}") from None


async def handle_input(session: MonitorSession, text: str) -> bool:
    """Dispatch one line of user input.

    Plain text is sent to the device. A leading ``/`` starts a command;
    ``//`` escapes a literal slash.

    Returns:
        False if the user asked to quit.

    Raises:
        CommandError: If the command or its argument is invalid.
        TransportError: If a baud rate change fails to disconnect.
    """
    if not text.startswith(COMMAND_PREFIX) or text.startswith(COMMAND_PREFIX * 2):
        session.on_user_send(text[1:] if text.startswith(COMMAND_PREFIX) else text)
        return True

    name, _, arg = text[len(COMMAND_PREFIX) :].partition(" ")
    name = name.lower()
    arg = arg.strip()

    if name in ("quit", "exit", "q"):
        return False
    elif name == "clear":
        session.clear_console()
    elif name == "baud":
        try:
            baud_rate = BaudRate.from_value(arg)
        except ValueError as e:
            raise CommandError(str(e)) from None
        await session.on_baud_rate_selected(baud_rate)
    elif name == "eol":
        try:
            line_ending = LineEnding.from_name(arg)
        except ValueError as e:
            raise CommandError(str(e)) from None
        session.on_line_ending_selected(line_ending)
    elif name == "timestamp":
        session.on_timestamp_toggled(parse_switch(arg))
    elif name == "autoscroll":
        session.on_autoscroll_toggled(parse_switch(arg))
    else:
        raise CommandError(f"Unknown command: {COMMAND_PREFIX}{name}")

    return True
