"""Arcade Window for the Point Controller
=======================================

Captures raw keyboard, focus and frame events from arcade and delegates them:

* key press / release  -> InputManager (movement keys, quit key)
* window deactivated   -> InputManager.handle_focus_change(False)
* on_update(dt)        -> PointController.tick(dt)
* on_draw              -> injected PointRenderer

Tests never open this window; everything it calls is covered headlessly.

Key Bindings
------------
W/A/S/D: Move the point (diagonals when two are held)
Q: Quit (configurable)
ESC: Quit
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

import arcade

from core.point_controller import PointController
from interface.coordinate_display import CoordinateDisplay
from interface.input_manager import InputManager
from renderer.ports import PointRenderer

logger = logging.getLogger(__name__)

KEY_SYMBOLS: Dict[int, str] = {
    arcade.key.W: "w",
    arcade.key.A: "a",
    arcade.key.S: "s",
    arcade.key.D: "d",
}


def symbol_to_char(symbol: int) -> Optional[str]:
    """Map an arcade key symbol to the character the InputManager expects."""
    if symbol in KEY_SYMBOLS:
        return KEY_SYMBOLS[symbol]
    # Printable ASCII symbols equal their lower-case code point.
    if 32 < symbol < 127:
        return chr(symbol)
    return None


class PointControllerWindow(arcade.Window):  # pragma: no cover - GUI
    """Minimal arcade window: input delegation, frame ticks and rendering only."""

    def __init__(
        self,
        controller: PointController,
        input_manager: InputManager,
        display: CoordinateDisplay,
        renderer: PointRenderer,
        *,
        width: int = 800,
        height: int = 800,
        title: str = "Point Controller",
    ) -> None:
        super().__init__(width, height, title)
        self.controller = controller
        self.input_manager = input_manager
        self.display = display
        self.renderer = renderer
        self.background_color = arcade.color.DARK_SLATE_GRAY

    # --- Input Delegation (no movement logic here) ---
    def on_key_press(self, symbol: int, modifiers: int) -> None:
        if symbol == arcade.key.ESCAPE:
            self.controller.request_quit()
            return
        key = symbol_to_char(symbol)
        if key is not None:
            self.input_manager.handle_key_press(key)

    def on_key_release(self, symbol: int, modifiers: int) -> None:
        key = symbol_to_char(symbol)
        if key is not None:
            self.input_manager.handle_key_release(key)

    def on_deactivate(self) -> None:
        self.input_manager.handle_focus_change(False)

    def on_activate(self) -> None:
        self.input_manager.handle_focus_change(True)

    # --- Frame loop ---
    def on_update(self, delta_time: float) -> None:
        self.controller.tick(delta_time)
        self.display.refresh_time()
        if self.controller.should_quit:
            logger.info("Exiting application...")
            self.close()

    def on_draw(self) -> None:
        self.clear()
        self.renderer.draw(self.controller.position, self.display.coordinate_text, self.display.time_text)
