from __future__ import annotations

import random

from space_miner.config import GameConfig
from space_miner.models import Asteroid, GamePhase, ResourceKind, ResourceNode, SessionState, Ship


# Fixed starting layout of the reference playfield.
INITIAL_ASTEROIDS: tuple[tuple[int, int], ...] = ((5, 5), (20, 8), (15, 12))
INITIAL_RESOURCES: tuple[tuple[int, int, ResourceKind], ...] = (
    (8, 3, ResourceKind.iron),
    (25, 10, ResourceKind.crystal),
    (12, 7, ResourceKind.gold),
)


def _in_grid(x: int, y: int, config: GameConfig) -> bool:
    return 0 <= x < config.grid_width and 0 <= y < config.grid_height


def new_session(*, config: GameConfig, seed: int | None = None) -> SessionState:
    """Build the starting state for one session.

    Starting entities that fall outside a smaller configured grid are dropped so
    that every position in the returned state is in bounds.
    """

    if seed is None:
        seed = random.SystemRandom().randint(1, 2**31 - 1)

    asteroids = [Asteroid(x=x, y=y) for x, y in INITIAL_ASTEROIDS if _in_grid(x, y, config)]
    resources = [
        ResourceNode(x=x, y=y, kind=kind) for x, y, kind in INITIAL_RESOURCES if _in_grid(x, y, config)
    ]

    return SessionState(
        ship=Ship.new(config),
        asteroids=asteroids,
        resources=resources,
        spawn_rate=config.initial_spawn_rate,
        phase=GamePhase.welcome,
        seed=seed,
    )
