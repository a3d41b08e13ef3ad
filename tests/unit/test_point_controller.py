import math
import unittest

from core.event_bus import EventBus
from core.events.topics import EventTopic
from core.movement_state import MovementState
from core.point_controller import PointController


class FixedClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


class TestPointController(unittest.TestCase):
    def setUp(self):
        self.clock = FixedClock(10.0)
        self.event_bus = EventBus()
        self.controller = PointController(event_bus=self.event_bus, movement_speed=2.0, clock=self.clock)
        self.updates = []
        self.quits = []
        self.resets = []
        self.event_bus.subscribe(EventTopic.POSITION_UPDATED, lambda **p: self.updates.append(p))
        self.event_bus.subscribe(EventTopic.QUIT_REQUESTED, lambda **p: self.quits.append(p))
        self.event_bus.subscribe(EventTopic.STATE_RESET, lambda **p: self.resets.append(p))

    def test_builds_state_from_arguments(self):
        controller = PointController(movement_speed=1.5, start_position=(1.0, -2.0))
        self.assertEqual(controller.state.movement_speed, 1.5)
        self.assertEqual(controller.position, (1.0, -2.0))
        self.assertIsInstance(controller.event_bus, EventBus)

    def test_uses_injected_state(self):
        state = MovementState(position=(4.0, 4.0), clock=self.clock)
        controller = PointController(state, self.event_bus)
        self.assertIs(controller.state, state)
        self.assertEqual(controller.position, (4.0, 4.0))

    def test_state_and_construction_options_are_exclusive(self):
        state = MovementState(clock=self.clock)
        with self.assertRaises(ValueError):
            PointController(state, movement_speed=5.0)
        with self.assertRaises(ValueError):
            PointController(state, start_position=(1.0, 1.0))
        with self.assertRaises(ValueError):
            PointController(state, clock=self.clock)

    def test_tick_moves_and_publishes(self):
        self.controller.state.add_key("w")
        position = self.controller.tick(0.5)

        self.assertEqual(position, (0.0, 1.0))
        self.assertEqual(self.updates, [{"position": (0.0, 1.0), "elapsed": 0.5}])

    def test_idle_tick_publishes_nothing(self):
        self.assertEqual(self.controller.tick(1.0), (0.0, 0.0))
        self.controller.state.add_key("w")
        self.controller.state.add_key("s")
        self.controller.tick(1.0)
        self.assertEqual(self.updates, [])

    def test_tick_at_boundary_publishes_nothing_once_clamped(self):
        self.controller.state.add_key("d")
        self.controller.tick(100.0)
        self.controller.tick(100.0)
        self.assertEqual(len(self.updates), 1)
        self.assertEqual(self.controller.position, (10.0, 0.0))

    def test_straight_then_diagonal(self):
        self.controller.state.add_key("w")
        self.controller.tick(0.5)
        self.controller.state.add_key("d")
        x, y = self.controller.tick(0.5)
        self.assertAlmostEqual(x, 1 / math.sqrt(2), places=6)
        self.assertAlmostEqual(y, 1 + 1 / math.sqrt(2), places=6)

    def test_tick_from_clock_measures_elapsed(self):
        self.controller.state.add_key("d")
        self.clock.now += 0.25
        position = self.controller.tick_from_clock()
        self.assertEqual(position, (0.5, 0.0))
        self.assertAlmostEqual(self.controller.state.elapsed_time, 0.25)
        self.assertEqual(self.controller.state.last_update_time, self.clock.now)

    def test_quit_freezes_ticks_and_announces_once(self):
        self.controller.state.add_key("w")
        self.controller.request_quit()
        self.controller.request_quit()

        self.assertTrue(self.controller.should_quit)
        self.assertEqual(self.controller.tick(1.0), (0.0, 0.0))
        self.assertEqual(self.updates, [])
        self.assertEqual(self.quits, [{"position": (0.0, 0.0)}])

    def test_reset_clears_quit_and_publishes(self):
        self.controller.state.add_key("a")
        self.controller.tick(1.0)
        self.controller.request_quit()

        self.controller.reset((1.0, 1.0))

        self.assertFalse(self.controller.should_quit)
        self.assertEqual(self.controller.state.pressed_keys, set())
        self.assertEqual(self.resets, [{"position": (1.0, 1.0)}])
        self.assertEqual(self.updates[-1], {"position": (1.0, 1.0), "elapsed": 0.0})

        # Quit can be announced again after a reset.
        self.controller.request_quit()
        self.assertEqual(len(self.quits), 2)


if __name__ == "__main__":
    unittest.main()
