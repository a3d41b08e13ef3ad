"""Point Controller entry point.

Interactive (default): opens an arcade window with a point moved by WASD.
Headless (``--headless``): ticks the controller for a fixed number of frames
while holding the given keys and prints the final coordinate readout.
"""
from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

import yaml

from config.settings import DEFAULT_CONFIG_FILE, AppSettings
from core.point_controller import PointController
from interface.coordinate_display import CoordinateDisplay
from interface.input_manager import InputManager
from utils.logger import (
    log_application_start,
    log_application_stop,
    log_calls,
    log_component_initialization,
    log_error_with_context,
    setup_logging,
)

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Move a point around with the WASD keys.")
    parser.add_argument("--config", default=DEFAULT_CONFIG_FILE, help="Path to the YAML settings file.")
    parser.add_argument("--log-level", default=None, choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--speed", type=float, default=None, help="Movement speed in units per second.")
    parser.add_argument("--headless", action="store_true", help="Run without a window (CI / smoke test).")
    parser.add_argument("--frames", type=int, default=60, help="Headless: number of frames to simulate.")
    parser.add_argument("--dt", type=float, default=1 / 60, help="Headless: seconds per frame.")
    parser.add_argument("--keys", default="", help="Headless: movement keys held for the whole run, e.g. 'wd'.")
    return parser


@log_calls
def build_components(settings: AppSettings):
    """Create the controller, input manager and coordinate display for a session."""
    log_component_initialization("movement state")
    controller = PointController(movement_speed=settings.movement_speed, start_position=settings.start_position)
    log_component_initialization("keyboard input")
    input_manager = InputManager(controller, quit_key=settings.quit_key)
    log_component_initialization("coordinate display")
    display = CoordinateDisplay(controller.event_bus, controller.position)
    return controller, input_manager, display


def run_headless(settings: AppSettings, *, frames: int, dt: float, keys: str = "") -> str:
    controller, input_manager, display = build_components(settings)
    for key in keys:
        input_manager.handle_key_press(key)
    for _ in range(max(frames, 0)):
        if controller.should_quit:
            break
        controller.tick(dt)
    return display.coordinate_text


def run_interactive(settings: AppSettings) -> None:  # pragma: no cover - GUI
    import arcade

    from interface.arcade_app import PointControllerWindow
    from renderer.arcade_renderer import ArcadeRenderer
    from renderer.viewport import Viewport

    controller = None
    try:
        controller, input_manager, display = build_components(settings)
        log_component_initialization("window")
        renderer = ArcadeRenderer(Viewport(settings.window_width, settings.window_height))
        PointControllerWindow(
            controller,
            input_manager,
            display,
            renderer,
            width=settings.window_width,
            height=settings.window_height,
            title=settings.window_title,
        )
        print(f"Point Controller is ready! Use WASD keys to move the point. Press '{settings.quit_key}' to quit.")
        arcade.run()
    except Exception as exc:
        log_error_with_context("Point Controller encountered an error", "application_error", exc)
        raise
    finally:
        if controller is not None:
            controller.state.clear_keys()


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        settings = AppSettings.load(args.config).with_overrides(
            movement_speed=args.speed,
            log_level=args.log_level,
        )
    except (ValueError, yaml.YAMLError) as exc:
        parser.error(str(exc))

    setup_logging(settings.log_level, settings.log_dir)
    log_application_start()
    try:
        if args.headless:
            print(run_headless(settings, frames=args.frames, dt=args.dt, keys=args.keys))
        else:
            run_interactive(settings)
    except KeyboardInterrupt:
        logger.info("Application interrupted by user (Ctrl+C)")
    finally:
        log_application_stop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
