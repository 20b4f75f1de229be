"""Synchronous event bus for CSS generation events."""

from __future__ import annotations

from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Dispatches generation events to listeners in subscription order.

    Listeners subscribed to every event run before type-specific ones.
    Exceptions raised by listeners propagate to the emitter.
    """

    def __init__(self) -> None:
        self._by_type: dict[type, list[Listener]] = {}
        self._catch_all: list[Listener] = []

    def subscribe(self, event_type: type, callback: Listener) -> None:
        self._by_type.setdefault(event_type, []).append(callback)

    def unsubscribe(self, event_type: type, callback: Listener) -> bool:
        """Remove *callback* for *event_type*; return False if it was not subscribed."""
        listeners = self._by_type.get(event_type, [])
        if callback not in listeners:
            return False
        listeners.remove(callback)
        return True

    def on_all(self, callback: Listener) -> None:
        self._catch_all.append(callback)

    def emit(self, event: Any) -> int:
        """Deliver *event*; returns the number of listeners it reached."""
        listeners = self._catch_all + self._by_type.get(type(event), [])
        for listener in listeners:
            listener(event)
        return len(listeners)
