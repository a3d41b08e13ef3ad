"""Arcade renderer for the point controller."""

from __future__ import annotations

from typing import Optional, Tuple

import arcade

from renderer.viewport import Viewport


class ArcadeRenderer:
    """Draw the arena, the point and the readout using :mod:`arcade`.

    Implements :class:`renderer.ports.PointRenderer`.
    """

    def __init__(
        self,
        viewport: Viewport,
        *,
        point_radius: float = 8.0,
        point_color: arcade.types.Color = arcade.color.RED,
        font_size: int = 14,
    ) -> None:
        self.viewport = viewport
        self.point_radius = point_radius
        self.point_color = point_color
        self.font_size = font_size
        self._coordinate_label: Optional[arcade.Text] = None
        self._time_label: Optional[arcade.Text] = None

    def draw(self, position: Tuple[float, float], coordinate_text: str, time_text: str) -> None:
        """Render the current frame."""

        self._draw_grid()
        self._draw_boundary()
        self._draw_point(position)
        self._draw_labels(coordinate_text, time_text)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _draw_grid(self) -> None:
        for (x0, y0), (x1, y1) in self.viewport.axis_segments():
            arcade.draw_line(x0, y0, x1, y1, arcade.color.DARK_SLATE_BLUE, 1)

        cx, cy = self.viewport.center
        (left, bottom), (right, top) = self.viewport.arena_corners()
        arcade.draw_line(left, cy, right, cy, arcade.color.LIGHT_GRAY, 2)
        arcade.draw_line(cx, bottom, cx, top, arcade.color.LIGHT_GRAY, 2)

    def _draw_boundary(self) -> None:
        (left, bottom), (right, top) = self.viewport.arena_corners()
        color = arcade.color.WHITE
        arcade.draw_line(left, bottom, right, bottom, color, 2)
        arcade.draw_line(right, bottom, right, top, color, 2)
        arcade.draw_line(right, top, left, top, color, 2)
        arcade.draw_line(left, top, left, bottom, color, 2)

    def _draw_point(self, position: Tuple[float, float]) -> None:
        px, py = self.viewport.world_to_screen(position)
        arcade.draw_circle_filled(px, py, self.point_radius, self.point_color)

    def _draw_labels(self, coordinate_text: str, time_text: str) -> None:
        # Cached Text objects; draw_text every frame is slow.
        top = self.viewport.height - self.font_size - 8
        if self._coordinate_label is None:
            self._coordinate_label = arcade.Text(coordinate_text, 10, top, arcade.color.WHITE, self.font_size)
            self._time_label = arcade.Text(
                time_text, self.viewport.width - 10, top, arcade.color.WHITE, self.font_size, anchor_x="right"
            )
        self._coordinate_label.text = coordinate_text
        self._time_label.text = time_text
        self._coordinate_label.draw()
        self._time_label.draw()
