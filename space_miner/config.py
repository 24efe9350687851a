from __future__ import annotations

import logging
import os
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Tuning knobs for one session.

    Defaults reproduce the reference game: a 32x15 grid, 80ms frames and a spawn
    interval that starts at 50 frames and tightens by 5 every 500 frames down to 10.
    """

    grid_width: int = 32
    grid_height: int = 15

    start_x: int = 10
    start_y: int = 10

    max_fuel: float = 100.0
    # Burned every frame, whatever the ship does.
    fuel_decay: float = 0.5
    crystal_refuel: float = 20.0

    mine_reward: int = 10

    initial_spawn_rate: int = 50
    spawn_rate_step: int = 5
    min_spawn_rate: int = 10
    difficulty_interval: int = 500

    # Seconds.
    frame_interval: float = 0.08
    poll_timeout: float = 0.01

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("Grid dimensions must be positive")
        if not (0 <= self.start_x < self.grid_width and 0 <= self.start_y < self.grid_height):
            raise ValueError(f"Start position ({self.start_x}, {self.start_y}) is outside the grid")
        if self.min_spawn_rate < 1:
            raise ValueError("min_spawn_rate must be at least 1")
        if self.initial_spawn_rate < self.min_spawn_rate:
            raise ValueError("initial_spawn_rate must not be below min_spawn_rate")
        # The ramp may only tighten the spawn rate.
        if self.spawn_rate_step < 0:
            raise ValueError("spawn_rate_step must not be negative")
        if self.fuel_decay < 0:
            raise ValueError("fuel_decay must not be negative")
        if self.difficulty_interval < 1:
            raise ValueError("difficulty_interval must be at least 1")
        # Ship.fuel is validated against a 100.0 ceiling.
        if not 0 < self.max_fuel <= 100.0:
            raise ValueError("max_fuel must be in (0, 100]")


@dataclass(frozen=True, slots=True)
class LogSettings:
    # None keeps logging silent; the terminal belongs to the game.
    log_file: str | None
    level: int


def log_settings_from_env() -> LogSettings:
    level_name = os.environ.get("SPACE_MINER_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    return LogSettings(
        log_file=os.environ.get("SPACE_MINER_LOG_FILE") or None,
        level=level,
    )
