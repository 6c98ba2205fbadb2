"""Interactive monitor host: transport loop, rendering and user input."""

import asyncio
import logging
import sys
import threading
from contextlib import suppress

from rich.console import Console
from rich.live import Live

from .cli import CommandError, MonitorView, format_status, handle_input
from .container import Container
from .domain import TransportError

logger = logging.getLogger(__name__)


def _post_input(
    loop: asyncio.AbstractEventLoop,
    queue: "asyncio.Queue[str | None]",
    item: str | None,
) -> bool:
    """Hand one input item to the loop. Returns False once the loop is closed."""
    if loop.is_closed():
        return False
    with suppress(RuntimeError):
        loop.call_soon_threadsafe(queue.put_nowait, item)
        return True
    return False


def _start_stdin_reader(loop: asyncio.AbstractEventLoop, queue: "asyncio.Queue[str | None]") -> None:
    """Feed stdin lines into the event loop from a daemon thread.

    Input is handled on the loop, so handlers never run concurrently.
    ``None`` marks end of input.
    """

    def read() -> None:
        for line in sys.stdin:
            if not _post_input(loop, queue, line.rstrip("\r\n")):
                return
        _post_input(loop, queue, None)

    threading.Thread(target=read, name="stdin-reader", daemon=True).start()


async def _render_loop(
    container: Container,
    view: MonitorView,
    live: Live,
    refresh: asyncio.Event,
) -> None:
    """Repaint after every notified change."""
    session = container.session
    while True:
        await refresh.wait()
        refresh.clear()
        status = format_status(container.port, container.model, session.connection_state)
        panel = view.render(session.get_display_lines(), session.should_auto_scroll(), status)
        live.update(panel, refresh=True)


async def _input_loop(container: Container, queue: "asyncio.Queue[str | None]") -> None:
    """Handle user input until quit or end of input."""
    while True:
        text = await queue.get()
        if text is None:
            return
        try:
            if not await handle_input(container.session, text):
                return
        except CommandError as e:
            logger.warning("%s", e)
        except TransportError as e:
            logger.error("Baud rate change failed: %s", e)


async def run_monitor(container: Container, console: Console | None = None) -> None:
    """Run the monitor until the user quits.

    The display session is attached for the duration of the call and is
    detached on every exit path.
    """
    loop = asyncio.get_running_loop()
    view = MonitorView(height=container.view_height)
    refresh = asyncio.Event()
    queue: asyncio.Queue[str | None] = asyncio.Queue()

    unsubscribe = container.session.subscribe(refresh.set)
    transport_task = asyncio.create_task(container.transport.run())
    try:
        with container.session, Live(console=console, auto_refresh=False) as live:
            render_task = asyncio.create_task(_render_loop(container, view, live, refresh))
            _start_stdin_reader(loop, queue)
            try:
                await _input_loop(container, queue)
            finally:
                render_task.cancel()
                with suppress(asyncio.CancelledError):
                    await render_task
    finally:
        unsubscribe()
        container.transport.stop()
        transport_task.cancel()
        with suppress(asyncio.CancelledError):
            await transport_task
        logger.info("Serial monitor stopped")
