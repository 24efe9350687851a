from __future__ import annotations

from statemachine import State, StateMachine

from space_miner.models import GamePhase, SessionState


class SessionFSM(StateMachine):
    """FSM wrapper around SessionState.

    - phases: welcome -> running -> game_over
    - `crash` covers collision and fuel exhaustion, `abort` is an explicit quit.
    - the game loop applies the systems; the FSM only guards transitions.
    """

    welcome = State(GamePhase.welcome.value, value=GamePhase.welcome.value, initial=True)
    running = State(GamePhase.running.value, value=GamePhase.running.value)
    game_over = State(GamePhase.game_over.value, value=GamePhase.game_over.value, final=True)

    launch = welcome.to(running)
    crash = running.to(game_over)
    abort = running.to(game_over)

    def __init__(self, session: SessionState):
        self.session = session
        super().__init__(start_value=session.phase.value)

    def sync_phase_to_model(self) -> None:
        self.session.phase = GamePhase(str(self.current_state.value))
