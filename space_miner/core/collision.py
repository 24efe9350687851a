from __future__ import annotations

from collections.abc import Iterable

from space_miner.models import Asteroid, Ship


def collides(ship: Ship, hazards: Iterable[Asteroid]) -> bool:
    """True iff the ship sits on the same cell as any hazard."""

    return any(h.x == ship.x and h.y == ship.y for h in hazards)
