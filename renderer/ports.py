"""Protocol describing what the window expects from a point renderer.

The movement core never references a renderer. The window receives one by
injection and hands it the latest position and readout strings every frame,
so drawing backends (arcade, a recording stub in tests) can be swapped freely.
"""

from __future__ import annotations

from typing import Protocol, Tuple, runtime_checkable


@runtime_checkable
class PointRenderer(Protocol):
    def draw(self, position: Tuple[float, float], coordinate_text: str, time_text: str) -> None:
        """Render one frame: the point at ``position`` and the two text lines."""


__all__ = ["PointRenderer"]
