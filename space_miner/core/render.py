from __future__ import annotations

import math
from collections.abc import Sequence

from space_miner.config import GameConfig
from space_miner.models import Asteroid, ResourceKind, ResourceNode, Ship

SHIP_GLYPH = ">A<"
ASTEROID_GLYPH = "O"
BLANK = " "
RESOURCE_GLYPHS: dict[ResourceKind, str] = {
    ResourceKind.iron: "*",
    ResourceKind.crystal: "♦",
    ResourceKind.gold: "$",
}

FUEL_SEGMENTS = 10
FUEL_FULL = "█"
FUEL_EMPTY = "░"


def _row_width(config: GameConfig) -> int:
    # Two margin cells so the ship glyph fits when the ship is on the last column.
    return config.grid_width + len(SHIP_GLYPH) - 1


def _box_top(width: int) -> str:
    return "╔" + "═" * width + "╗"


def _box_bottom(width: int) -> str:
    return "╚" + "═" * width + "╝"


def _cell_glyphs(
    asteroids: Sequence[Asteroid],
    resources: Sequence[ResourceNode],
) -> dict[tuple[int, int], str]:
    """Glyph per occupied cell. Asteroids win over resources; first resource wins."""

    cells: dict[tuple[int, int], str] = {}
    for node in resources:
        cells.setdefault((node.x, node.y), RESOURCE_GLYPHS[node.kind])
    for a in asteroids:
        cells[(a.x, a.y)] = ASTEROID_GLYPH
    return cells


def render_row(y: int, *, ship: Ship, cells: dict[tuple[int, int], str], width: int) -> str:
    out: list[str] = []
    x = 0
    while x < width:
        if (x, y) == (ship.x, ship.y):
            # The glyph covers the next cells too, hiding whatever is there.
            out.append(SHIP_GLYPH)
            x += len(SHIP_GLYPH)
            continue
        out.append(cells.get((x, y), BLANK))
        x += 1
    return "".join(out)[:width]


def fuel_bar(fuel: float) -> str:
    # Round half up: 85.0 fuel shows 9 segments.
    filled = min(FUEL_SEGMENTS, max(0, math.floor(fuel / 10 + 0.5)))
    return FUEL_FULL * filled + FUEL_EMPTY * (FUEL_SEGMENTS - filled)


def status_line(*, ship: Ship, score: int) -> str:
    return f"FUEL: {fuel_bar(ship.fuel)}  CARGO: {ship.cargo_total}   SCORE: {score}"


def render_frame(
    ship: Ship,
    asteroids: Sequence[Asteroid],
    resources: Sequence[ResourceNode],
    score: int,
    *,
    config: GameConfig,
) -> list[str]:
    """Project the current state onto text lines.

    The frame is a bordered box of `grid_height` rows followed by a status line.
    Pure: nothing passed in is modified.
    """

    width = _row_width(config)
    cells = _cell_glyphs(asteroids, resources)

    lines = [_box_top(width)]
    for y in range(config.grid_height):
        lines.append("║" + render_row(y, ship=ship, cells=cells, width=width) + "║")
    lines.append(_box_bottom(width))
    lines.append(status_line(ship=ship, score=score))
    return lines


WELCOME_LINES: tuple[str, ...] = (
    "╔════════════════════════════════════╗",
    "║        RUSTY SPACE MINER           ║",
    "║------------------------------------║",
    "║  Use WASD to move, SPACE to mine   ║",
    "║  Avoid asteroids!                  ║",
    "║  Press Q to quit                   ║",
    "╚════════════════════════════════════╝",
    "",
    "Press any key to start...",
)


def render_welcome() -> list[str]:
    return list(WELCOME_LINES)


def game_over_message(score: int) -> str:
    return f"Game Over! Final Score: {score}"
