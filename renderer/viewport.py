"""World-to-screen mapping for the square point arena.

World coordinates span ``[-bound, bound]`` on both axes with y pointing up,
which matches arcade's bottom-left screen origin, so the mapping is a uniform
scale around the window centre.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

from core.movement_state import POSITION_BOUNDS

Point = Tuple[float, float]
Segment = Tuple[Point, Point]


@dataclass(frozen=True)
class Viewport:
    width: int
    height: int
    bound: float = POSITION_BOUNDS[1]
    margin: float = 40.0

    @property
    def center(self) -> Point:
        return (self.width / 2, self.height / 2)

    @property
    def scale(self) -> float:
        """Pixels per world unit, fitting the whole arena inside the margins."""
        usable = max(min(self.width, self.height) - 2 * self.margin, 1.0)
        return usable / (2 * self.bound)

    def world_to_screen(self, position: Point) -> Point:
        cx, cy = self.center
        return (cx + position[0] * self.scale, cy + position[1] * self.scale)

    def arena_corners(self) -> Tuple[Point, Point]:
        """Bottom-left and top-right screen corners of the boundary square."""
        return (
            self.world_to_screen((-self.bound, -self.bound)),
            self.world_to_screen((self.bound, self.bound)),
        )

    def axis_segments(self, step: float = 1.0) -> List[Segment]:
        """Grid lines every ``step`` world units, axes included."""
        segments: List[Segment] = []
        count = int(self.bound // step)
        for i in range(-count, count + 1):
            offset = i * step
            segments.append((self.world_to_screen((offset, -self.bound)), self.world_to_screen((offset, self.bound))))
            segments.append((self.world_to_screen((-self.bound, offset)), self.world_to_screen((self.bound, offset))))
        return segments
