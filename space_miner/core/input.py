from __future__ import annotations

import asyncio
from enum import StrEnum
from typing import Protocol


class Intent(StrEnum):
    up = "up"
    down = "down"
    left = "left"
    right = "right"
    mine = "mine"
    quit = "quit"
    none = "none"


# Fixed bindings; keys are case-sensitive.
KEY_BINDINGS: dict[str, Intent] = {
    "w": Intent.up,
    "a": Intent.left,
    "s": Intent.down,
    "d": Intent.right,
    " ": Intent.mine,
    "q": Intent.quit,
}

MOVE_INTENTS = frozenset({Intent.up, Intent.down, Intent.left, Intent.right})


class InputSource(Protocol):
    def poll(self, timeout: float) -> bool:
        """Return True if a key is pending, waiting at most `timeout` seconds."""
        ...

    def read(self) -> str:
        """Return the pending key."""
        ...


def translate_key(key: str | None) -> Intent:
    """Map a raw key to an intent. Total: anything unbound is Intent.none."""

    if key is None:
        return Intent.none
    return KEY_BINDINGS.get(key, Intent.none)


async def wait_for_any_key(source: InputSource, *, poll_timeout: float) -> str:
    """Poll until a key arrives, yielding to the event loop between empty polls."""

    while True:
        if source.poll(poll_timeout):
            return source.read()
        await asyncio.sleep(0)


async def read_intent(source: InputSource, *, poll_timeout: float) -> Intent:
    key = await wait_for_any_key(source, poll_timeout=poll_timeout)
    return translate_key(key)
