"""In-process event dispatching with concurrently run handlers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

__all__ = [
    "HandlerAlreadyRegisteredError",
    "Event",
    "EventHandler",
    "EventDispatcher",
]


class HandlerAlreadyRegisteredError(ValueError):
    """Raised when a handler is registered twice for the same event."""

    def __init__(self) -> None:
        super().__init__("handler already registered")


@dataclass
class Event:
    """Something that happened: a name, a payload and a timestamp."""

    name: str
    payload: Any = None
    date_time: datetime = field(default_factory=datetime.now)


class EventHandler(ABC):
    """An operation run when an event is dispatched."""

    @abstractmethod
    def handle(self, event: Event) -> None:
        """Process ``event``."""


class EventDispatcher:
    """Keeps handlers per event name and runs them when an event fires.

    Handlers are compared by identity, as distinct handler objects with the
    same state are still different handlers.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def register(self, event_name: str, handler: EventHandler) -> None:
        """Add ``handler`` for ``event_name``; raise if it is already there."""
        registered = self._handlers.setdefault(event_name, [])
        if any(h is handler for h in registered):
            raise HandlerAlreadyRegisteredError()
        registered.append(handler)

    def clear(self) -> None:
        """Forget every handler of every event."""
        self._handlers = {}

    def has(self, event_name: str, handler: EventHandler) -> bool:
        """Tell whether ``handler`` is registered for ``event_name``."""
        return any(h is handler for h in self._handlers.get(event_name, ()))

    def dispatch(self, event: Event) -> None:
        """Run every handler of the event's name concurrently and wait.

        If a handler raises, the first such exception (in registration
        order) is re-raised once all handlers have finished.
        """
        handlers = list(self._handlers.get(event.name, ()))
        if not handlers:
            return
        with ThreadPoolExecutor(max_workers=len(handlers)) as pool:
            futures = [pool.submit(h.handle, event) for h in handlers]
        for future in futures:
            future.result()

    def remove(self, event_name: str, handler: EventHandler) -> None:
        """Remove ``handler`` from ``event_name``; do nothing if absent."""
        registered = self._handlers.get(event_name)
        if registered is None:
            return
        for index, h in enumerate(registered):
            if h is handler:
                del registered[index]
                return

    def handlers_for(self, event_name: str) -> tuple[EventHandler, ...]:
        """Return the handlers of ``event_name`` in registration order."""
        return tuple(self._handlers.get(event_name, ()))