"""Registry of event bus topics used by the point controller.

Each entry is declared as an :class:`~enum.Enum` member and documents the
producer, the intended consumers and the payload guarantees for the associated
event. Importing modules should rely on the enum members rather than raw
strings so topic names cannot drift between publishers and subscribers.
"""

from __future__ import annotations

from enum import Enum

__all__ = ["EventTopic"]


class EventTopic(str, Enum):
    """Enumeration of every topic published on the event bus."""

    KEY_PRESSED = "KeyPressed"
    """Published by :class:`interface.input_manager.InputManager`.

    Guarantees: ``key`` (lower-cased movement key) and ``pressed_keys``
    (frozenset snapshot after the change).
    """

    KEY_RELEASED = "KeyReleased"
    """Published by the input manager when a movement key is let go.

    Guarantees: same payload as :attr:`KEY_PRESSED`.
    """

    KEYS_CLEARED = "KeysCleared"
    """Published when every held key is dropped after the window lost focus."""

    POSITION_UPDATED = "PositionUpdated"
    """Published by :class:`core.point_controller.PointController`.

    Subscribers: coordinate display, renderers.
    Guarantees: ``position`` as an ``(x, y)`` tuple inside the boundary and
    ``elapsed`` seconds for the step (``0.0`` after a reset).
    """

    QUIT_REQUESTED = "QuitRequested"
    """Published once when the quit key is pressed; the window loop closes."""

    STATE_RESET = "StateReset"
    """Published after the movement state returned to its initial values.

    Guarantees: ``position`` the state was reset to.
    """

