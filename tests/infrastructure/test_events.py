"""Tests for Emitter and HandlerSubscription."""

from serialmonitor.infrastructure.serial import Emitter


class TestEmitter:
    """Tests for Emitter."""

    def test_emit_in_registration_order(self):
        """Test handlers receive events in the order they subscribed."""
        emitter: Emitter[str] = Emitter()
        calls = []
        emitter.subscribe(lambda e: calls.append(("a", e)))
        emitter.subscribe(lambda e: calls.append(("b", e)))

        emitter.emit("x")

        assert calls == [("a", "x"), ("b", "x")]

    def test_dispose_stops_delivery(self):
        """Test disposed handlers receive nothing."""
        emitter: Emitter[int] = Emitter()
        calls = []
        subscription = emitter.subscribe(calls.append)

        subscription.dispose()
        emitter.emit(1)

        assert calls == []
        assert len(emitter) == 0
        assert subscription.disposed

    def test_dispose_twice(self):
        """Test disposing twice is harmless."""
        emitter: Emitter[int] = Emitter()
        subscription = emitter.subscribe(lambda e: None)

        subscription.dispose()
        subscription.dispose()

        assert len(emitter) == 0

    def test_same_handler_registered_twice(self):
        """Test disposing one registration keeps the other."""
        emitter: Emitter[int] = Emitter()
        calls = []
        first = emitter.subscribe(calls.append)
        emitter.subscribe(calls.append)

        first.dispose()
        emitter.emit(7)

        assert calls == [7]

    def test_handler_may_dispose_during_emit(self):
        """Test a handler can unsubscribe itself while being called."""
        emitter: Emitter[int] = Emitter()
        calls = []
        subscription = None

        def handler(event):
            calls.append(event)
            subscription.dispose()

        subscription = emitter.subscribe(handler)
        emitter.emit(1)
        emitter.emit(2)

        assert calls == [1]
