"""Synchronous event bus connecting the movement core to its observers.

Publishers (point controller, input manager) announce position, key and quit
changes; observers (coordinate display, tests) receive the payload as keyword
arguments, immediately and on the caller's thread.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Tuple

from core.events.topics import EventTopic

__all__ = ["EventBus", "Subscriber"]

Subscriber = Callable[..., None]


class EventBus:
    def __init__(self) -> None:
        self._subscribers: Dict[EventTopic, List[Subscriber]] = {}

    def subscribe(self, topic: EventTopic, callback: Subscriber) -> None:
        """Register ``callback`` for ``topic``; registering it twice has no effect."""
        callbacks = self._subscribers.setdefault(topic, [])
        if callback not in callbacks:
            callbacks.append(callback)

    def unsubscribe(self, topic: EventTopic, callback: Subscriber) -> None:
        callbacks = self._subscribers.get(topic, [])
        if callback in callbacks:
            callbacks.remove(callback)
        if not callbacks:
            self._subscribers.pop(topic, None)

    def publish(self, topic: EventTopic, **payload: Any) -> None:
        # Iterate over a snapshot so a callback may unsubscribe itself.
        for callback in tuple(self._subscribers.get(topic, ())):
            callback(**payload)

    def get_subscribers(self, topic: EventTopic) -> Tuple[Subscriber, ...]:
        return tuple(self._subscribers.get(topic, ()))
