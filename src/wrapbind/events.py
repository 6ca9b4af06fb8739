"""Push-based event channels for presenter events.

Presenters keep one EventChannel per event name ("click", "input", ...).
Subscribing returns a disposer that removes the callback again.
"""

from __future__ import annotations

from typing import Any, Callable

Disposer = Callable[[], None]


class EventChannel:
    """Callbacks for a single event name, fired in subscription order."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._subscribers: list[Callable[[Any], None]] = []

    def emit(self, event: Any = None) -> None:
        """Push an event to all subscribers."""
        for cb in list(self._subscribers):
            cb(event)

    def subscribe(self, callback: Callable[[Any], None]) -> Disposer:
        """Register a callback. Returns a function that removes it."""
        self._subscribers.append(callback)

        def _unsubscribe() -> None:
            try:
                self._subscribers.remove(callback)
            except ValueError:
                pass  # already removed

        return _unsubscribe

    def __len__(self) -> int:
        return len(self._subscribers)

    def __repr__(self) -> str:
        return f"EventChannel({self.name!r}, {len(self._subscribers)} subscribers)"


class EventChannels:
    """Lazily created EventChannels keyed by event name."""

    def __init__(self) -> None:
        self._channels: dict[str, EventChannel] = {}

    def __getitem__(self, name: str) -> EventChannel:
        channel = self._channels.get(name)
        if channel is None:
            channel = self._channels[name] = EventChannel(name)
        return channel

    def listen(self, name: str, callback: Callable[[Any], None]) -> Disposer:
        return self[name].subscribe(callback)

    def dispatch(self, name: str, event: Any = None) -> bool:
        """Emit event on the named channel. Returns False if nobody listens."""
        channel = self._channels.get(name)
        if channel is None or not len(channel):
            return False
        channel.emit(event)
        return True
