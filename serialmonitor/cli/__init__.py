"""Command line interface."""

from .args import build_overrides, parse_args
from .commands import CommandError, handle_input
from .display import (
    MonitorView,
    console,
    format_status,
    print_ports,
    print_startup_screen,
)

__all__ = [
    "CommandError",
    "MonitorView",
    "build_overrides",
    "console",
    "format_status",
    "handle_input",
    "parse_args",
    "print_ports",
    "print_startup_screen",
]
