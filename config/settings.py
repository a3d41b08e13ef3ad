"""Typed application settings built from ``settings.yaml``."""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from typing import Any, Optional

from config.config_loader import ConfigLoader
from core.movement_state import DEFAULT_MOVEMENT_SPEED, MOVEMENT_KEYS

DEFAULT_CONFIG_FILE = "settings.yaml"


@dataclass(frozen=True)
class AppSettings:
    window_width: int = 800
    window_height: int = 800
    window_title: str = "Point Controller"
    movement_speed: float = DEFAULT_MOVEMENT_SPEED
    start_x: float = 0.0
    start_y: float = 0.0
    quit_key: str = "q"
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    def __post_init__(self) -> None:
        if self.window_width <= 0 or self.window_height <= 0:
            raise ValueError(f"Window size must be positive, got {self.window_width}x{self.window_height}")
        if not math.isfinite(self.movement_speed) or self.movement_speed <= 0:
            raise ValueError(f"movement.speed must be a positive number, got {self.movement_speed!r}")
        if len(self.quit_key) != 1:
            raise ValueError(f"input.quit_key must be a single character, got {self.quit_key!r}")
        if self.quit_key.lower() in MOVEMENT_KEYS:
            raise ValueError(f"input.quit_key {self.quit_key!r} clashes with a movement key")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ValueError(f"logging.level {self.log_level!r} is not a known log level")

    @property
    def start_position(self) -> tuple[float, float]:
        return (self.start_x, self.start_y)

    @classmethod
    def from_loader(cls, loader: ConfigLoader) -> "AppSettings":
        defaults = cls()
        try:
            return cls(
                window_width=int(loader.get("window", "width", default=defaults.window_width)),
                window_height=int(loader.get("window", "height", default=defaults.window_height)),
                window_title=str(loader.get("window", "title", default=defaults.window_title)),
                movement_speed=float(loader.get("movement", "speed", default=defaults.movement_speed)),
                start_x=float(loader.get("movement", "start_x", default=defaults.start_x)),
                start_y=float(loader.get("movement", "start_y", default=defaults.start_y)),
                quit_key=str(loader.get("input", "quit_key", default=defaults.quit_key)),
                log_level=str(loader.get("logging", "level", default=defaults.log_level)).upper(),
                log_dir=loader.get("logging", "log_dir", default=defaults.log_dir),
            )
        except (TypeError, ValueError) as exc:
            raise ValueError(f"Invalid configuration in {loader.config_file or '<string>'}: {exc}") from exc

    @classmethod
    def load(cls, config_file: str = DEFAULT_CONFIG_FILE) -> "AppSettings":
        return cls.from_loader(ConfigLoader(config_file))

    def with_overrides(self, **overrides: Any) -> "AppSettings":
        """Return a copy with every non-None override applied (CLI flags)."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})
