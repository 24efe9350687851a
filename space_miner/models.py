from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from space_miner.config import GameConfig


class ResourceKind(StrEnum):
    iron = "iron"
    crystal = "crystal"
    gold = "gold"


class UpgradeKind(StrEnum):
    laser = "laser"
    shields = "shields"
    thrusters = "thrusters"


class GamePhase(StrEnum):
    welcome = "welcome"
    running = "running"
    game_over = "game_over"


def _empty_cargo() -> dict[ResourceKind, int]:
    return {kind: 0 for kind in ResourceKind}


class Ship(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    fuel: float = Field(100.0, ge=0.0, le=100.0)

    # One counter per kind, never decremented.
    cargo: dict[ResourceKind, int] = Field(default_factory=_empty_cargo)

    # Stored only; upgrades have no gameplay effect yet.
    upgrades: list[UpgradeKind] = Field(default_factory=list)

    @classmethod
    def new(cls, config: GameConfig) -> "Ship":
        return cls(x=config.start_x, y=config.start_y, fuel=config.max_fuel)

    @property
    def position(self) -> tuple[int, int]:
        return self.x, self.y

    @property
    def cargo_total(self) -> int:
        return sum(self.cargo.values())


class Asteroid(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)


class ResourceNode(BaseModel):
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)
    kind: ResourceKind


class SessionState(BaseModel):
    """Everything a single play session owns.

    Systems receive this record (or parts of it) and mutate it in place; nothing
    about a session lives outside of it.
    """

    ship: Ship
    asteroids: list[Asteroid] = Field(default_factory=list)
    resources: list[ResourceNode] = Field(default_factory=list)

    score: int = Field(0, ge=0)
    tick: int = Field(0, ge=0)

    # Frames between asteroid spawns; smaller means faster.
    spawn_rate: int = Field(..., ge=1)

    phase: GamePhase = GamePhase.welcome

    # For reproducibility/debugging of the asteroid stream.
    seed: int
