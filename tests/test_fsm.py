from __future__ import annotations

import pytest
from statemachine.exceptions import TransitionNotAllowed

from space_miner.config import GameConfig
from space_miner.fsm import SessionFSM
from space_miner.game_setup import new_session
from space_miner.models import GamePhase


def test_session_starts_on_welcome_screen(config: GameConfig) -> None:
    state = new_session(config=config, seed=1)
    fsm = SessionFSM(state)

    assert fsm.current_state.value == GamePhase.welcome.value
    assert state.phase == GamePhase.welcome


def test_launch_then_crash_reaches_game_over(config: GameConfig) -> None:
    state = new_session(config=config, seed=1)
    fsm = SessionFSM(state)

    fsm.launch()
    fsm.sync_phase_to_model()
    assert state.phase == GamePhase.running

    fsm.crash()
    fsm.sync_phase_to_model()
    assert state.phase == GamePhase.game_over


def test_abort_is_only_allowed_while_running(config: GameConfig) -> None:
    state = new_session(config=config, seed=1)
    fsm = SessionFSM(state)

    with pytest.raises(TransitionNotAllowed):
        fsm.abort()

    fsm.launch()
    fsm.abort()
    assert fsm.current_state.value == GamePhase.game_over.value


def test_game_over_is_final(config: GameConfig) -> None:
    state = new_session(config=config, seed=1)
    fsm = SessionFSM(state)
    fsm.launch()
    fsm.crash()

    with pytest.raises(TransitionNotAllowed):
        fsm.launch()


def test_fsm_resumes_from_model_phase(config: GameConfig) -> None:
    state = new_session(config=config, seed=1)
    state.phase = GamePhase.running

    fsm = SessionFSM(state)

    assert fsm.current_state.value == GamePhase.running.value
