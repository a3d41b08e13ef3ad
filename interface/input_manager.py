"""Input Manager (keyboard to movement state)
==========================================

Purpose
-------
Convert low-level keyboard events captured by the windowing layer (e.g. an
arcade Window) into calls on the point controller's movement state, and
broadcast what happened on the EventBus.

This is the validation boundary for keys: only the four movement characters
ever reach :meth:`MovementState.add_key`. Everything else is either the quit
key or silently ignored.

High-Level Flow
---------------
1. Window layer maps a key symbol to a character and calls
   handle_key_press("w") / handle_key_release("w").
2. InputManager lower-cases the key and filters it.
3. Movement keys update the held-key set and publish KEY_PRESSED /
   KEY_RELEASED; the quit key asks the controller to stop.
4. Focus loss drops every held key so nothing stays "stuck" down.

Thread Safety
-------------
Single-threaded expectation; key events and frame ticks come from the same
event loop.
"""
from __future__ import annotations

import logging
from typing import FrozenSet

from core.events.topics import EventTopic
from core.movement_state import MOVEMENT_KEYS
from core.point_controller import PointController
from utils.logger import log_user_action

logger = logging.getLogger(__name__)

DEFAULT_QUIT_KEY = "q"


def is_movement_key(key: object) -> bool:
    """Return True if ``key`` is one of w, a, s, d (any case)."""
    return isinstance(key, str) and key.lower() in MOVEMENT_KEYS


class InputManager:
    """Translate raw key events into movement state changes.

    External expected usage pattern (pseudo):
        im = InputManager(controller)
        im.handle_key_press("W")
        im.handle_key_release("w")
        im.handle_focus_change(False)

    The surrounding window layer decides which physical keys map to these
    characters, keeping this class framework agnostic.
    """

    def __init__(self, controller: PointController, *, quit_key: str = DEFAULT_QUIT_KEY) -> None:
        self.controller = controller
        self.quit_key = quit_key.lower()

    @property
    def state(self):
        return self.controller.state

    @property
    def event_bus(self):
        return self.controller.event_bus

    # ------------------------------------------------------------------
    # Keyboard
    # ------------------------------------------------------------------
    def handle_key_press(self, key: str) -> bool:
        """Process a key press. Returns True when the key was consumed."""
        if not isinstance(key, str) or not key:
            return False
        key_lower = key.lower()

        if key_lower == self.quit_key:
            log_user_action("quit key pressed", key_lower)
            self.controller.request_quit()
            return True

        if key_lower not in MOVEMENT_KEYS:
            logger.debug("Ignoring non-movement key press: %r", key)
            return False

        self.state.add_key(key_lower)
        log_user_action("key pressed", key_lower)
        self.event_bus.publish(EventTopic.KEY_PRESSED, key=key_lower, pressed_keys=self.pressed_keys())
        return True

    def handle_key_release(self, key: str) -> bool:
        """Process a key release. Returns True when a movement key was released."""
        if not is_movement_key(key):
            return False
        key_lower = key.lower()
        self.state.remove_key(key_lower)
        log_user_action("key released", key_lower)
        self.event_bus.publish(EventTopic.KEY_RELEASED, key=key_lower, pressed_keys=self.pressed_keys())
        return True

    # ------------------------------------------------------------------
    # Window focus
    # ------------------------------------------------------------------
    def handle_focus_change(self, has_focus: bool) -> None:
        if has_focus:
            logger.debug("Window gained focus")
            return
        logger.debug("Window lost focus - clearing key states")
        self.state.clear_keys()
        self.event_bus.publish(EventTopic.KEYS_CLEARED, pressed_keys=self.pressed_keys())

    def is_movement_key(self, key: object) -> bool:
        return is_movement_key(key)

    def pressed_keys(self) -> FrozenSet[str]:
        """Snapshot of the held keys (a copy; mutating it changes nothing)."""
        return frozenset(self.state.pressed_keys)
