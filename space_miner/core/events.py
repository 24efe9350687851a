from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

EventType = Literal[
    "ASTEROID_SPAWNED",
    "SPAWN_RATE_TIGHTENED",
    "RESOURCE_MINED",
    "SHIP_DESTROYED",
    "FUEL_EXHAUSTED",
    "SESSION_QUIT",
]


@dataclass(frozen=True, slots=True)
class FrameEvent:
    type: EventType
    tick: int
    payload: dict[str, Any]

    @staticmethod
    def at(*, type: EventType, tick: int, **payload: Any) -> "FrameEvent":
        return FrameEvent(type=type, tick=tick, payload=payload)
