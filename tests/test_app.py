"""Tests for the interactive monitor host."""

import asyncio
import io

from rich.console import Console

from serialmonitor.app import _post_input, run_monitor
from serialmonitor.composition import create_container


class TestRunMonitor:
    """Tests for run_monitor."""

    async def test_quit_detaches_and_stops(self, tmp_path, serial_factory, monkeypatch):
        """Test /quit ends the run with the session detached and link closed."""
        monkeypatch.setattr("sys.stdin", io.StringIO("/timestamp on\n/quit\n"))
        container = create_container(
            tmp_path / "missing.yaml",
            overrides={"serial": {"port": "COM4", "poll_interval": 0.001}},
            serial_factory=serial_factory,
        )
        console = Console(file=io.StringIO(), width=100)

        await asyncio.wait_for(run_monitor(container, console), timeout=5)

        assert not container.session.is_attached
        assert container.transport.auto_connect is False
        assert not container.transport.is_connected
        assert container.model.timestamp is True

    async def test_end_of_input_stops(self, tmp_path, serial_factory, monkeypatch):
        """Test closing stdin ends the run."""
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        container = create_container(
            tmp_path / "missing.yaml",
            overrides={"serial": {"port": "COM4"}},
            serial_factory=serial_factory,
        )

        await asyncio.wait_for(run_monitor(container, Console(file=io.StringIO())), timeout=5)

        assert not container.session.is_attached


class TestPostInput:
    """Tests for handing stdin lines to the loop."""

    def test_closed_loop_is_refused(self):
        """Test a reader outliving the loop stops instead of raising."""
        loop = asyncio.new_event_loop()
        queue: asyncio.Queue[str | None] = asyncio.Queue()
        loop.close()

        assert _post_input(loop, queue, "late line") is False
        assert queue.empty()

    def test_open_loop_receives_item(self):
        """Test the item is queued once the loop runs."""
        loop = asyncio.new_event_loop()
        queue: asyncio.Queue[str | None] = asyncio.Queue()
        try:
            assert _post_input(loop, queue, "hello") is True
            loop.run_until_complete(asyncio.sleep(0))
        finally:
            loop.close()

        assert queue.get_nowait() == "hello"
