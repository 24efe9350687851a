from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Protocol

from space_miner.config import GameConfig
from space_miner.core.collision import collides
from space_miner.core.events import FrameEvent
from space_miner.core.input import InputSource, Intent, read_intent, wait_for_any_key
from space_miner.core.mining import mine
from space_miner.core.physics import apply_physics
from space_miner.core.render import game_over_message, render_frame, render_welcome
from space_miner.core.spawner import advance_spawner
from space_miner.fsm import SessionFSM
from space_miner.game_setup import new_session
from space_miner.models import ResourceKind, SessionState

logger = logging.getLogger(__name__)


class Display(Protocol):
    def write_frame(self, lines: Sequence[str]) -> None:
        """Clear the surface, draw `lines` and flush."""
        ...


class SessionOutcome(StrEnum):
    quit = "quit"
    collision = "collision"
    fuel_exhausted = "fuel_exhausted"


@dataclass(slots=True)
class StepResult:
    # None while the session keeps running.
    outcome: SessionOutcome | None = None
    mined: ResourceKind | None = None
    events: list[FrameEvent] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class SessionResult:
    outcome: SessionOutcome
    score: int
    tick: int

    @property
    def is_loss(self) -> bool:
        return self.outcome != SessionOutcome.quit


def terminal_outcome(state: SessionState) -> SessionOutcome | None:
    if collides(state.ship, state.asteroids):
        return SessionOutcome.collision
    if state.ship.fuel <= 0:
        return SessionOutcome.fuel_exhausted
    return None


def step(state: SessionState, intent: Intent, *, rng: random.Random, config: GameConfig) -> StepResult:
    """Advance one running frame after input has been read.

    Order: physics, tick + spawner, terminal check, then mining and scoring. A quit
    intent is handled by the caller and must not reach this function.
    """

    result = StepResult()

    apply_physics(intent, state.ship, config=config)

    state.tick += 1
    report = advance_spawner(state, rng=rng, config=config)
    if report.spawned is not None:
        result.events.append(
            FrameEvent.at(type="ASTEROID_SPAWNED", tick=state.tick, x=report.spawned.x, y=report.spawned.y)
        )
    if report.spawn_rate_change is not None:
        old, new = report.spawn_rate_change
        result.events.append(FrameEvent.at(type="SPAWN_RATE_TIGHTENED", tick=state.tick, old=old, new=new))

    outcome = terminal_outcome(state)
    if outcome is not None:
        result.outcome = outcome
        event_type = "SHIP_DESTROYED" if outcome == SessionOutcome.collision else "FUEL_EXHAUSTED"
        result.events.append(
            FrameEvent.at(type=event_type, tick=state.tick, x=state.ship.x, y=state.ship.y, score=state.score)
        )
        return result

    mined = mine(intent, state.ship, state.resources, config=config)
    if mined is not None:
        state.score += config.mine_reward
        result.mined = mined
        result.events.append(
            FrameEvent.at(type="RESOURCE_MINED", tick=state.tick, kind=mined.value, score=state.score)
        )

    return result


def _draw(display: Display, state: SessionState, *, config: GameConfig, extra: Sequence[str] = ()) -> None:
    lines = render_frame(state.ship, state.asteroids, state.resources, state.score, config=config)
    display.write_frame([*lines, *extra])


def _log_events(events: Sequence[FrameEvent]) -> None:
    for event in events:
        logger.debug("%s tick=%d %s", event.type, event.tick, event.payload)


async def run_session(
    display: Display,
    source: InputSource,
    *,
    config: GameConfig | None = None,
    seed: int | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> SessionResult:
    """Play one session from the welcome screen to its end.

    Returns how the session ended. A quit ends silently; a collision or running out
    of fuel draws the final frame with the game-over message. I/O errors from the
    display or the input source propagate to the caller.
    """

    cfg = config or GameConfig()
    state = new_session(config=cfg, seed=seed)
    rng = random.Random(state.seed)
    fsm = SessionFSM(state)

    logger.info("Session created (seed=%d, grid=%dx%d)", state.seed, cfg.grid_width, cfg.grid_height)

    display.write_frame(render_welcome())
    await wait_for_any_key(source, poll_timeout=cfg.poll_timeout)
    fsm.launch()
    fsm.sync_phase_to_model()

    while True:
        _draw(display, state, config=cfg)

        intent = await read_intent(source, poll_timeout=cfg.poll_timeout)
        if intent == Intent.quit:
            fsm.abort()
            fsm.sync_phase_to_model()
            _log_events([FrameEvent.at(type="SESSION_QUIT", tick=state.tick, score=state.score)])
            result = SessionResult(outcome=SessionOutcome.quit, score=state.score, tick=state.tick)
            break

        frame = step(state, intent, rng=rng, config=cfg)
        _log_events(frame.events)

        if frame.outcome is not None:
            fsm.crash()
            fsm.sync_phase_to_model()
            _draw(display, state, config=cfg, extra=[game_over_message(state.score)])
            result = SessionResult(outcome=frame.outcome, score=state.score, tick=state.tick)
            break

        await sleep(cfg.frame_interval)

    logger.info("Session ended: %s (score=%d, tick=%d)", result.outcome.value, result.score, result.tick)
    return result
