from __future__ import annotations

from space_miner.config import GameConfig
from space_miner.core.input import Intent
from space_miner.models import Ship


def move_ship(intent: Intent, ship: Ship, *, config: GameConfig) -> None:
    """Move one cell along one axis; moving into a wall is a no-op."""

    if intent == Intent.up and ship.y > 0:
        ship.y -= 1
    elif intent == Intent.down and ship.y < config.grid_height - 1:
        ship.y += 1
    elif intent == Intent.left and ship.x > 0:
        ship.x -= 1
    elif intent == Intent.right and ship.x < config.grid_width - 1:
        ship.x += 1


def burn_fuel(ship: Ship, *, config: GameConfig) -> None:
    ship.fuel = max(0.0, ship.fuel - config.fuel_decay)


def apply_physics(intent: Intent, ship: Ship, *, config: GameConfig) -> None:
    """Apply movement for this frame, then the per-frame fuel decay."""

    move_ship(intent, ship, config=config)
    burn_fuel(ship, config=config)
