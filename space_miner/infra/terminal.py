from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import ExitStack, contextmanager

from blessed import Terminal
from blessed.keyboard import Keystroke


class TerminalDisplay:
    """Full-frame display surface: clear, redraw every line, flush."""

    def __init__(self, term: Terminal):
        self.term = term

    def write_frame(self, lines: Sequence[str]) -> None:
        body = "".join(self.term.move_xy(0, row) + line for row, line in enumerate(lines))
        print(self.term.home + self.term.clear + body, end="", flush=True)


class TerminalInput:
    """Key input with a timed, non-blocking poll."""

    def __init__(self, term: Terminal):
        self.term = term
        self._pending: Keystroke | None = None

    def poll(self, timeout: float) -> bool:
        # inkey also drains blessed's own buffer, which kbhit does not see.
        if self._pending is None:
            key = self.term.inkey(timeout=timeout)
            if key:
                self._pending = key
        return self._pending is not None

    def read(self) -> str:
        key = self._pending if self._pending is not None else self.term.inkey(timeout=0)
        self._pending = None
        # Named keys (arrows, escape, ...) come back as e.g. "KEY_UP".
        if key.is_sequence:
            return key.name or ""
        return str(key)


@contextmanager
def terminal_session(term: Terminal | None = None) -> Iterator[tuple[TerminalDisplay, TerminalInput]]:
    """Enter the alternate screen, cbreak mode and a hidden cursor.

    All three are restored on exit, including when the body raises.
    """

    term = term or Terminal()
    with ExitStack() as stack:
        stack.enter_context(term.fullscreen())
        stack.enter_context(term.cbreak())
        stack.enter_context(term.hidden_cursor())
        try:
            yield TerminalDisplay(term), TerminalInput(term)
        finally:
            print(term.normal, end="", flush=True)
