"""Handler registries backing transport subscriptions."""

from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")


class HandlerSubscription(Generic[T]):
    """Subscription handle that removes its handler on dispose."""

    def __init__(self, handlers: list[Callable[[T], None]], handler: Callable[[T], None]) -> None:
        self._handlers = handlers
        self._handler = handler
        self._disposed = False

    @property
    def disposed(self) -> bool:
        return self._disposed

    def dispose(self) -> None:
        if self._disposed:
            return
        self._disposed = True
        if self._handler in self._handlers:
            self._handlers.remove(self._handler)


class Emitter(Generic[T]):
    """Delivers events to handlers in registration order."""

    def __init__(self) -> None:
        self._handlers: list[Callable[[T], None]] = []

    def subscribe(self, handler: Callable[[T], None]) -> HandlerSubscription[T]:
        self._handlers.append(handler)
        return HandlerSubscription(self._handlers, handler)

    def emit(self, event: T) -> None:
        # Copy so a handler may dispose its own subscription
        for handler in list(self._handlers):
            handler(event)

    def __len__(self) -> int:
        return len(self._handlers)
