"""Test bootstrap: ensure the repository root is on sys.path.

This allows absolute imports like `core.movement_state` and `interface.input_manager`
which assume the working directory is the repository root.
"""
import os
import sys

import pytest

PACKAGE_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if PACKAGE_ROOT not in sys.path:
    sys.path.insert(0, PACKAGE_ROOT)

from core.event_bus import EventBus  # noqa: E402
from core.movement_state import MovementState  # noqa: E402
from core.point_controller import PointController  # noqa: E402


class FakeClock:
    """Manually advanced clock standing in for time.monotonic."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def advance(self, seconds: float) -> float:
        self.now += seconds
        return self.now

    def __call__(self) -> float:
        return self.now


class EventRecorder:
    """Subscribes to topics on a bus and keeps every payload it receives."""

    def __init__(self, event_bus: EventBus, *topics) -> None:
        self.events = []
        for topic in topics:
            event_bus.subscribe(topic, self._make_handler(topic))

    def _make_handler(self, topic):
        def handler(**payload):
            self.events.append((topic, payload))
        return handler

    def payloads(self, topic):
        return [payload for recorded, payload in self.events if recorded == topic]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def state(clock):
    return MovementState(movement_speed=2.0, clock=clock)


@pytest.fixture
def event_bus():
    return EventBus()


@pytest.fixture
def controller(clock, event_bus):
    return PointController(event_bus=event_bus, movement_speed=2.0, clock=clock)


@pytest.fixture
def recorder_factory():
    return EventRecorder
