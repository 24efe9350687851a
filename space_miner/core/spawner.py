from __future__ import annotations

import random
from dataclasses import dataclass

from space_miner.config import GameConfig
from space_miner.models import Asteroid, SessionState


@dataclass(frozen=True, slots=True)
class SpawnReport:
    """What the spawner did on one tick.

    - `spawned`: the asteroid appended this tick, if any.
    - `spawn_rate_change`: (old, new) when the difficulty ramp tightened the rate.
    """

    spawned: Asteroid | None = None
    spawn_rate_change: tuple[int, int] | None = None


def random_cell(*, rng: random.Random, config: GameConfig) -> tuple[int, int]:
    return rng.randrange(config.grid_width), rng.randrange(config.grid_height)


def tightened_spawn_rate(spawn_rate: int, *, config: GameConfig) -> int:
    return max(config.min_spawn_rate, spawn_rate - config.spawn_rate_step)


def advance_spawner(state: SessionState, *, rng: random.Random, config: GameConfig) -> SpawnReport:
    """Run the spawn and difficulty checks for `state.tick`.

    Both checks run every call and may fire on the same tick. New asteroids may land
    on the ship, a resource or another asteroid; positions are only kept in bounds.
    """

    tick = state.tick
    spawned: Asteroid | None = None
    change: tuple[int, int] | None = None

    if tick % state.spawn_rate == 0:
        x, y = random_cell(rng=rng, config=config)
        spawned = Asteroid(x=x, y=y)
        state.asteroids.append(spawned)

    if tick % config.difficulty_interval == 0:
        new_rate = tightened_spawn_rate(state.spawn_rate, config=config)
        if new_rate != state.spawn_rate:
            change = (state.spawn_rate, new_rate)
            state.spawn_rate = new_rate

    return SpawnReport(spawned=spawned, spawn_rate_change=change)
