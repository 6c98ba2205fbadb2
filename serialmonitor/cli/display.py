"""Display utilities for the startup screen and the live monitor view."""

import sys
from collections.abc import Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from serialmonitor import __version__
from serialmonitor.domain import ConnectionState, Line, SerialPortInfo
from serialmonitor.infrastructure.config import MonitorModel

# Force UTF-8 for Windows console
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")

console = Console()


def _on_off(value: bool) -> str:
    return "on" if value else "off"


def print_ports(ports: Sequence[SerialPortInfo], target: Console | None = None) -> None:
    """Print detected serial ports as a table."""
    out = target or console
    if not ports:
        out.print("[yellow]No serial ports found[/yellow]")
        return

    table = Table(title="Serial ports", title_justify="left")
    table.add_column("Device", style="bold cyan", no_wrap=True)
    table.add_column("Description")
    table.add_column("Hardware ID", style="dim")
    for port in ports:
        table.add_row(port.device, port.description, port.hwid)
    out.print(table)


def print_startup_screen(port: str, model: MonitorModel, target: Console | None = None) -> None:
    """Print the startup summary.

    Args:
        port: Serial device being monitored.
        model: Current monitor settings.
        target: Console to print to (defaults to stdout).
    """
    out = target or console

    table = Table.grid(padding=(0, 2))
    table.add_column(style="bold")
    table.add_column()
    table.add_row("Port", f"[cyan]{port}[/cyan]")
    table.add_row("Baud", model.baud_rate.label)
    table.add_row("Line ending", model.line_ending.label)
    table.add_row("Timestamp", _on_off(model.timestamp))
    table.add_row("Autoscroll", _on_off(model.autoscroll))

    out.print(f"[bold]Serial Monitor[/bold] [dim]v{__version__}[/dim]")
    out.print(table)
    out.print("[dim]Type text and press Enter to send. /quit to exit.[/dim]")


def format_status(port: str, model: MonitorModel, state: ConnectionState) -> str:
    """Build the one-line status shown under the output."""
    connected = state is ConnectionState.CONNECTED
    link = "[green]connected[/green]" if connected else "[red]disconnected[/red]"
    return (
        f"{port} {link} | {model.baud_rate.label} | {model.line_ending.label} | "
        f"timestamp {_on_off(model.timestamp)} | autoscroll {_on_off(model.autoscroll)}"
    )


class MonitorView:
    """Fixed-height viewport over the committed display lines.

    The viewport follows the newest line only when told to scroll;
    otherwise it stays where it is.
    """

    def __init__(self, height: int = 30) -> None:
        self._height = height
        self._top = 0

    @property
    def height(self) -> int:
        return self._height

    @property
    def top(self) -> int:
        """Index of the first visible line."""
        return self._top

    def visible_lines(self, lines: Sequence[Line], scroll_to_end: bool) -> Sequence[Line]:
        """Resolve the lines inside the viewport for this render pass."""
        bottom_top = max(0, len(lines) - self._height)
        if scroll_to_end or self._top > bottom_top:
            self._top = bottom_top
        return lines[self._top : self._top + self._height]

    def render(self, lines: Sequence[Line], scroll_to_end: bool, status: str = "") -> Panel:
        """Render one pass of the output panel."""
        visible = self.visible_lines(lines, scroll_to_end)
        body = Text("\n".join(line.display_text.rstrip("\r\n") for line in visible))
        return Panel(
            body,
            title="Serial Monitor",
            title_align="left",
            subtitle=status or None,
            subtitle_align="left",
            height=self._height + 2,
        )
