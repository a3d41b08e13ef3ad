"""Coordinate and clock readout shown next to the point.

The display is a passive observer: it listens for ``POSITION_UPDATED`` on the
EventBus and keeps two strings ready for whichever renderer draws them.
"""
from __future__ import annotations

import datetime
from typing import Any, Optional

from core.event_bus import EventBus
from core.events.topics import EventTopic
from core.movement_state import Vector

TIME_FORMAT = "%H:%M:%S"


def format_position(position: Vector) -> str:
    """Format ``position`` as ``"Position: (x, y)"`` with two-decimal rounding."""
    # Adding 0.0 turns -0.0 into 0.0 so the readout never shows a signed zero.
    x = round(float(position[0]), 2) + 0.0
    y = round(float(position[1]), 2) + 0.0
    return f"Position: ({x}, {y})"


def format_current_time(now: Optional[datetime.datetime] = None) -> str:
    if now is None:
        now = datetime.datetime.now()
    return now.strftime(TIME_FORMAT)


class CoordinateDisplay:
    def __init__(self, event_bus: EventBus, initial_position: Vector = (0.0, 0.0)) -> None:
        self.event_bus = event_bus
        self.position: Vector = initial_position
        self.coordinate_text = format_position(initial_position)
        self.time_text = format_current_time()
        event_bus.subscribe(EventTopic.POSITION_UPDATED, self._on_position_updated)

    def _on_position_updated(self, position: Vector, **_: Any) -> None:
        self.position = position
        self.coordinate_text = format_position(position)

    def refresh_time(self, now: Optional[datetime.datetime] = None) -> str:
        self.time_text = format_current_time(now)
        return self.time_text

    def detach(self) -> None:
        """Stop following position updates."""
        self.event_bus.unsubscribe(EventTopic.POSITION_UPDATED, self._on_position_updated)
