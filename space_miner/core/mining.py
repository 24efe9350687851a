from __future__ import annotations

from space_miner.config import GameConfig
from space_miner.core.input import Intent
from space_miner.models import ResourceKind, ResourceNode, Ship


def find_node_at(resources: list[ResourceNode], *, x: int, y: int) -> int | None:
    return next((i for i, node in enumerate(resources) if node.x == x and node.y == y), None)


def mine(intent: Intent, ship: Ship, resources: list[ResourceNode], *, config: GameConfig) -> ResourceKind | None:
    """Pick up the first resource under the ship, if the intent is to mine.

    The node is removed from `resources` and credited to the ship's cargo; crystals
    also refuel the ship. Returns the mined kind, or None when nothing was mined.
    Scoring is left to the caller.
    """

    if intent != Intent.mine:
        return None

    idx = find_node_at(resources, x=ship.x, y=ship.y)
    if idx is None:
        return None

    node = resources.pop(idx)
    ship.cargo[node.kind] = ship.cargo.get(node.kind, 0) + 1

    if node.kind == ResourceKind.crystal:
        ship.fuel = min(config.max_fuel, ship.fuel + config.crystal_refuel)

    return node.kind
