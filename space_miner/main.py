from __future__ import annotations

import asyncio
import logging

from space_miner.config import GameConfig, LogSettings, log_settings_from_env
from space_miner.core.render import game_over_message
from space_miner.game_loop import SessionResult, run_session
from space_miner.infra.terminal import terminal_session

logger = logging.getLogger(__name__)


def configure_logging(settings: LogSettings) -> None:
    # The game owns the terminal, so logs only ever go to a file.
    if settings.log_file is None:
        logging.basicConfig(level=settings.level, handlers=[logging.NullHandler()])
        return
    logging.basicConfig(
        filename=settings.log_file,
        level=settings.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def play(config: GameConfig | None = None) -> SessionResult:
    with terminal_session() as (display, source):
        return asyncio.run(run_session(display, source, config=config))


def main() -> None:
    configure_logging(log_settings_from_env())

    try:
        result = play()
    except Exception:
        logger.exception("Session aborted")
        raise

    # The alternate screen is gone by now; repeat the message on the normal one.
    if result.is_loss:
        print(game_over_message(result.score))


if __name__ == "__main__":
    main()
