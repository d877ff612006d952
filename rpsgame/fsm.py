from __future__ import annotations

from statemachine import State, StateMachine

from rpsgame.models import MatchConfig, MatchPhase


class MatchFSM(StateMachine):
    """Round counter for a match.

    - phases: awaiting moves -> (invalid move | valid moves) -> round complete, once per round -> finished
    - the match loop does the actual work; the FSM only guards ordering and counts rounds.
    """

    awaiting_moves = State(
        MatchPhase.awaiting_moves.value,
        value=MatchPhase.awaiting_moves.value,
        initial=True,
    )
    invalid_move = State(MatchPhase.invalid_move.value, value=MatchPhase.invalid_move.value)
    valid_moves = State(MatchPhase.valid_moves.value, value=MatchPhase.valid_moves.value)
    round_complete = State(MatchPhase.round_complete.value, value=MatchPhase.round_complete.value)
    finished = State(MatchPhase.finished.value, value=MatchPhase.finished.value, final=True)

    move_rejected = awaiting_moves.to(invalid_move)
    moves_accepted = awaiting_moves.to(valid_moves)
    round_resolved = invalid_move.to(round_complete) | valid_moves.to(round_complete)
    advance = round_complete.to(awaiting_moves, cond="rounds_remaining") | round_complete.to(
        finished, unless="rounds_remaining"
    )

    def __init__(self, config: MatchConfig):
        self.config = config
        self.rounds_completed = 0
        super().__init__()

    def rounds_remaining(self) -> bool:
        return self.rounds_completed < self.config.rounds

    def on_enter_round_complete(self) -> None:
        self.rounds_completed += 1

    @property
    def phase(self) -> MatchPhase:
        return MatchPhase(str(self.current_state.value))
