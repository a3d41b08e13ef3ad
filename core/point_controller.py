"""Point Controller (loop owner)
=============================

Owns the single :class:`~core.movement_state.MovementState` of a session and
advances it once per frame. Whatever drives the frame loop (the arcade window,
the headless runner, a test) calls :meth:`PointController.tick` with the
elapsed seconds; the controller applies movement and publishes the resulting
position on the :class:`~core.event_bus.EventBus` so displays and renderers
can follow along without the core knowing about them.
"""
from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from core.event_bus import EventBus
from core.events.topics import EventTopic
from core.movement_state import DEFAULT_MOVEMENT_SPEED, MovementState, Vector

logger = logging.getLogger(__name__)


class PointController:
    """Tick-driven wrapper around a :class:`MovementState`.

    Usage (pseudo)::

        controller = PointController(movement_speed=1.5)
        controller.state.add_key("w")
        controller.tick(1 / 60)

    ``movement_speed``, ``start_position`` and ``clock`` only describe a new
    state. Passing any of them together with an existing ``state`` raises
    ``ValueError``; configure that state directly instead.
    """

    def __init__(
        self,
        state: Optional[MovementState] = None,
        event_bus: Optional[EventBus] = None,
        *,
        movement_speed: Optional[float] = None,
        start_position: Optional[Vector] = None,
        clock: Optional[Callable[[], float]] = None,
    ) -> None:
        if state is not None:
            given = [
                name for name, value in (
                    ("movement_speed", movement_speed),
                    ("start_position", start_position),
                    ("clock", clock),
                ) if value is not None
            ]
            if given:
                raise ValueError(f"{', '.join(given)} cannot be combined with an existing state")
            self.state = state
        else:
            self.state = MovementState(
                position=start_position if start_position is not None else (0.0, 0.0),
                movement_speed=movement_speed if movement_speed is not None else DEFAULT_MOVEMENT_SPEED,
                clock=clock if clock is not None else time.monotonic,
            )
        self.event_bus = event_bus or EventBus()
        self._quit_announced = False

    @property
    def position(self) -> Vector:
        return self.state.current_position()

    @property
    def should_quit(self) -> bool:
        return self.state.should_quit

    # ------------------------------------------------------------------
    # Frame updates
    # ------------------------------------------------------------------
    def tick(self, elapsed: float) -> Vector:
        """Advance the point by ``elapsed`` seconds and return its new position.

        Publishes ``POSITION_UPDATED`` only when the position actually changed.
        Once a quit was requested the state is frozen and ticks do nothing.
        """
        if self.state.should_quit:
            return self.position

        before = self.position
        self.state.apply_movement(elapsed)
        after = self.position
        if after != before:
            self.event_bus.publish(EventTopic.POSITION_UPDATED, position=after, elapsed=self.state.elapsed_time)
        return after

    def tick_from_clock(self) -> Vector:
        """Measure the time since the previous tick with the state's clock, then tick."""
        elapsed = self.state.update_timing()
        return self.tick(elapsed)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def request_quit(self) -> None:
        self.state.request_quit()
        if not self._quit_announced:
            self._quit_announced = True
            logger.info("Quit requested at position %s", self.position)
            self.event_bus.publish(EventTopic.QUIT_REQUESTED, position=self.position)

    def reset(self, position: Vector = (0.0, 0.0)) -> None:
        self.state.reset(position)
        self._quit_announced = False
        self.event_bus.publish(EventTopic.STATE_RESET, position=self.position)
        self.event_bus.publish(EventTopic.POSITION_UPDATED, position=self.position, elapsed=0.0)
