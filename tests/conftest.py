from __future__ import annotations

import pytest
from fakes import RecordingDisplay

from space_miner.config import GameConfig
from space_miner.models import Ship


@pytest.fixture()
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture()
def ship(config: GameConfig) -> Ship:
    return Ship.new(config)


@pytest.fixture()
def display() -> RecordingDisplay:
    return RecordingDisplay()
