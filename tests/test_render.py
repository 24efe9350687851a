from __future__ import annotations

import pytest

from space_miner.config import GameConfig
from space_miner.core.render import fuel_bar, game_over_message, render_frame, render_welcome
from space_miner.models import Asteroid, ResourceKind, ResourceNode, Ship


def _grid_row(lines: list[str], y: int) -> str:
    # Strip the top border and the side walls.
    return lines[1 + y][1:-1]


def test_frame_has_fixed_dimensions(ship: Ship, config: GameConfig) -> None:
    lines = render_frame(ship, [], [], 0, config=config)

    assert len(lines) == config.grid_height + 3
    box = lines[:-1]
    assert {len(line) for line in box} == {config.grid_width + 4}
    assert box[0].startswith("╔") and box[-1].startswith("╚")


def test_ship_is_drawn_at_its_cell(ship: Ship, config: GameConfig) -> None:
    row = _grid_row(render_frame(ship, [], [], 0, config=config), 10)
    assert row.index(">A<") == 10


def test_glyphs_for_entities(config: GameConfig) -> None:
    s = Ship(x=0, y=0)
    resources = [
        ResourceNode(x=5, y=3, kind=ResourceKind.iron),
        ResourceNode(x=6, y=3, kind=ResourceKind.crystal),
        ResourceNode(x=7, y=3, kind=ResourceKind.gold),
    ]
    row = _grid_row(render_frame(s, [Asteroid(x=8, y=3)], resources, 0, config=config), 3)
    assert row[5:9] == "*♦$O"


def test_asteroid_wins_over_resource(config: GameConfig) -> None:
    s = Ship(x=0, y=0)
    lines = render_frame(s, [Asteroid(x=4, y=4)], [ResourceNode(x=4, y=4, kind=ResourceKind.gold)], 0, config=config)
    assert _grid_row(lines, 4)[4] == "O"


def test_ship_wins_over_asteroid(config: GameConfig) -> None:
    s = Ship(x=4, y=4)
    lines = render_frame(s, [Asteroid(x=4, y=4)], [], 0, config=config)
    row = _grid_row(lines, 4)
    assert row[4:7] == ">A<"
    assert "O" not in row


def test_ship_glyph_hides_entities_to_its_right(config: GameConfig) -> None:
    # Known artifact: the glyph covers the two cells right of the ship.
    s = Ship(x=10, y=10)
    resources = [ResourceNode(x=11, y=10, kind=ResourceKind.gold)]
    asteroids = [Asteroid(x=12, y=10)]

    row = _grid_row(render_frame(s, asteroids, resources, 0, config=config), 10)

    assert "$" not in row
    assert "O" not in row


def test_ship_on_last_column_keeps_full_glyph(config: GameConfig) -> None:
    s = Ship(x=config.grid_width - 1, y=0)
    lines = render_frame(s, [], [], 0, config=config)
    row = _grid_row(lines, 0)
    assert row.endswith(">A<")
    assert len(lines[1]) == config.grid_width + 4


@pytest.mark.parametrize(
    ("fuel", "filled"),
    [(100.0, 10), (98.5, 10), (85.0, 9), (84.9, 8), (4.9, 0), (5.0, 1), (0.0, 0)],
)
def test_fuel_bar_segments(fuel: float, filled: int) -> None:
    bar = fuel_bar(fuel)
    assert len(bar) == 10
    assert bar.count("█") == filled
    assert bar.count("░") == 10 - filled


def test_status_line_shows_cargo_total_and_score(config: GameConfig) -> None:
    s = Ship(x=0, y=0, fuel=50.0)
    s.cargo[ResourceKind.iron] = 2
    s.cargo[ResourceKind.gold] = 1

    status = render_frame(s, [], [], 30, config=config)[-1]

    assert status == "FUEL: █████░░░░░  CARGO: 3   SCORE: 30"


def test_render_is_pure(config: GameConfig) -> None:
    s = Ship(x=3, y=3, fuel=42.0)
    asteroids = [Asteroid(x=1, y=1)]
    resources = [ResourceNode(x=3, y=3, kind=ResourceKind.iron)]
    before = (s.model_dump(), [a.model_dump() for a in asteroids], [r.model_dump() for r in resources])

    first = render_frame(s, asteroids, resources, 10, config=config)
    second = render_frame(s, asteroids, resources, 10, config=config)

    assert first == second
    assert before == (s.model_dump(), [a.model_dump() for a in asteroids], [r.model_dump() for r in resources])


def test_welcome_and_game_over_text() -> None:
    welcome = render_welcome()
    assert any("WASD" in line for line in welcome)
    assert welcome[-1] == "Press any key to start..."
    assert game_over_message(40) == "Game Over! Final Score: 40"
