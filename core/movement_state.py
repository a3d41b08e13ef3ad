"""Movement State
==============

Holds everything the point controller knows about movement: which keys are
held, where the point is, how fast it travels and whether the user asked to
quit.

Movement Rules
--------------
* Each movement key maps to a unit direction (``KEY_MAPPINGS``).
* Held keys are summed; opposite keys cancel to an exact zero on their axis.
* When both axes are non-zero the sum is normalized so diagonal travel is as
  fast as axis-aligned travel.
* Distance per update is ``movement_speed * elapsed_seconds`` (units per
  second, so behaviour does not depend on the frame rate).
* Both coordinates are clamped to ``POSITION_BOUNDS`` after every update.

The state is owned by a single control loop and mutated in place. None of the
public operations raise on unexpected keys or elapsed values; validating raw
keyboard input is the job of :class:`interface.input_manager.InputManager`.
"""
from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, Optional, Set, Tuple

logger = logging.getLogger(__name__)

Vector = Tuple[float, float]

KEY_MAPPINGS: Dict[str, Vector] = {
    "w": (0.0, 1.0),
    "s": (0.0, -1.0),
    "a": (-1.0, 0.0),
    "d": (1.0, 0.0),
}
MOVEMENT_KEYS = frozenset(KEY_MAPPINGS)

POSITION_BOUNDS: Tuple[float, float] = (-10.0, 10.0)
DEFAULT_MOVEMENT_SPEED = 2.0


def clamp_position(position: Vector, bounds: Tuple[float, float] = POSITION_BOUNDS) -> Vector:
    """Clamp both components of ``position`` to ``bounds`` (hard floor/ceiling)."""
    low, high = bounds
    return (min(max(position[0], low), high), min(max(position[1], low), high))


@dataclass
class MovementState:
    """Pressed keys, position and timing for the controllable point.

    Attributes:
        position: Current ``(x, y)`` coordinates, always inside ``POSITION_BOUNDS``.
        movement_speed: Units travelled per second along the movement vector.
        pressed_keys: Lower-cased movement keys currently held.
        should_quit: Set by :meth:`request_quit`, cleared only by :meth:`reset`.
        last_update_time: Clock reading of the last timing tick (``clock()`` when omitted).
        elapsed_time: Seconds covered by the most recent update.
        clock: Zero-argument callable returning seconds; injectable for tests.
    """
    position: Vector = (0.0, 0.0)
    movement_speed: float = DEFAULT_MOVEMENT_SPEED
    pressed_keys: Set[str] = field(default_factory=set)
    should_quit: bool = False
    last_update_time: Optional[float] = None
    elapsed_time: float = 0.0
    clock: Callable[[], float] = field(default=time.monotonic, repr=False, compare=False)

    def __post_init__(self) -> None:
        speed = float(self.movement_speed)
        if not math.isfinite(speed) or speed <= 0:
            raise ValueError(f"movement_speed must be a positive number, got {self.movement_speed!r}")
        self.movement_speed = speed
        self.position = clamp_position((float(self.position[0]), float(self.position[1])))
        self.pressed_keys = set(self.pressed_keys)
        if self.last_update_time is None:
            self.last_update_time = self.clock()

    # ------------------------------------------------------------------
    # Key set management
    # ------------------------------------------------------------------
    def add_key(self, key: str) -> None:
        """Mark ``key`` as held. Adding a key twice has no further effect."""
        if not isinstance(key, str) or not key:
            return
        key = key.lower()
        if key in self.pressed_keys:
            return
        self.pressed_keys.add(key)
        logger.debug("Key added: %s", key)

    def remove_key(self, key: str) -> None:
        """Release ``key``; releasing a key that is not held is a no-op."""
        if not isinstance(key, str) or not key:
            return
        key = key.lower()
        if key in self.pressed_keys:
            self.pressed_keys.discard(key)
            logger.debug("Key removed: %s", key)

    def clear_keys(self) -> None:
        """Release every key (used when the window loses focus)."""
        if self.pressed_keys:
            logger.debug("Clearing held keys: %s", sorted(self.pressed_keys))
        self.pressed_keys.clear()

    # ------------------------------------------------------------------
    # Movement
    # ------------------------------------------------------------------
    def calculate_movement_vector(self) -> Vector:
        """Return the unit (or zero) direction implied by the held keys.

        Unknown keys contribute nothing. The result is not scaled by speed or
        time, so repeated calls with the same key set are side-effect free.
        """
        dx = 0.0
        dy = 0.0
        for key in self.pressed_keys:
            direction = KEY_MAPPINGS.get(key)
            if direction is None:
                continue
            dx += direction[0]
            dy += direction[1]

        if dx != 0.0 and dy != 0.0:
            magnitude = math.hypot(dx, dy)
            return (dx / magnitude, dy / magnitude)
        return (dx, dy)

    @property
    def is_moving(self) -> bool:
        return self.calculate_movement_vector() != (0.0, 0.0)

    def apply_movement(self, elapsed_seconds: float) -> "MovementState":
        """Advance the position by ``elapsed_seconds`` of travel and clamp it.

        Negative or NaN elapsed values count as zero. Axes with no direction
        are left untouched, so an infinite elapsed time still clamps cleanly.
        """
        elapsed = _sanitize_elapsed(elapsed_seconds)
        dx, dy = self.calculate_movement_vector()
        distance = self.movement_speed * elapsed

        x, y = self.position
        if dx != 0.0 and distance:
            x += dx * distance
        if dy != 0.0 and distance:
            y += dy * distance

        self.position = clamp_position((x, y))
        self.elapsed_time = elapsed
        if dx or dy:
            logger.debug(
                "Position updated: (%.4f, %.4f), elapsed: %.4fs, distance: %.4f",
                self.position[0], self.position[1], elapsed, distance,
            )
        return self

    def update_timing(self, now: Optional[float] = None) -> float:
        """Record the time since the previous tick and return it in seconds."""
        if now is None:
            now = self.clock()
        self.elapsed_time = max(now - self.last_update_time, 0.0)
        self.last_update_time = now
        return self.elapsed_time

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def request_quit(self) -> None:
        self.should_quit = True

    def reset(self, position: Vector = (0.0, 0.0)) -> None:
        """Return to a fresh state at ``position`` (origin by default)."""
        self.pressed_keys.clear()
        self.position = clamp_position((float(position[0]), float(position[1])))
        self.should_quit = False
        self.last_update_time = self.clock()
        self.elapsed_time = 0.0
        logger.debug("Movement state reset to position: %s", self.position)

    def current_position(self) -> Vector:
        return (self.position[0], self.position[1])


def _sanitize_elapsed(elapsed_seconds: float) -> float:
    try:
        elapsed = float(elapsed_seconds)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(elapsed) or elapsed < 0:
        return 0.0
    return elapsed
