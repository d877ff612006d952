from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from rpsgame.core.events import EventType, MatchEvent
from rpsgame.core.moves import GameMove, move_from_choice, move_from_random
from rpsgame.core.resolver import RoundOutcome, resolve_round
from rpsgame.fsm import MatchFSM
from rpsgame.messenger import GameMessenger
from rpsgame.models import MatchConfig
from rpsgame.players import Player

logger = logging.getLogger(__name__)

RandomGenerator = Callable[[], int]


@dataclass(frozen=True, slots=True)
class RoundMoves:
    # None when the user's selection was invalid.
    user_move: GameMove | None
    computer_move: GameMove


class SinglePlayerRpsGame:
    """User vs. computer match over a fixed number of rounds.

    The players are borrowed: their scores are updated in place and the caller keeps ownership.
    Exceptions from the messenger, the players or the random generator are not caught here.
    """

    def __init__(
        self,
        *,
        user: Player,
        computer: Player,
        messenger: GameMessenger,
        config: MatchConfig,
        random_generator: RandomGenerator,
    ):
        self.user = user
        self.computer = computer
        self.messenger = messenger
        self.config = config
        self.random_generator = random_generator
        self.history: list[MatchEvent] = []

    def play(self) -> None:
        fsm = MatchFSM(self.config)

        while fsm.current_state != fsm.finished:
            round_no = fsm.rounds_completed + 1
            self._record("ROUND_STARTED", round_no, {"rounds": self.config.rounds})

            moves = self.obtain_moves()
            if moves.user_move is None:
                fsm.move_rejected()
                logger.debug("Round %d: invalid move selection", round_no)
                self._record("MOVE_INVALID", round_no, {})
                self.messenger.show_invalid_input_message()
            else:
                fsm.moves_accepted()
                self.play_valid_round(round_no, moves.user_move, moves.computer_move)

            fsm.round_resolved()
            fsm.advance()

        logger.info(
            "Match finished: %s=%d %s=%d",
            self.user.name,
            self.user.score,
            self.computer.name,
            self.computer.score,
        )
        self._record(
            "MATCH_FINISHED",
            self.config.rounds,
            {"user_score": self.user.score, "computer_score": self.computer.score},
        )
        self.messenger.show_final_score(self.user, self.computer)

    def obtain_moves(self) -> RoundMoves:
        """Ask the user for a move and draw the computer's.

        The computer's move is drawn every round, also when the user's selection is invalid.
        """

        choice = self.messenger.request_move_choice()
        user_move = move_from_choice(choice)
        computer_move = move_from_random(self.random_generator())
        return RoundMoves(user_move=user_move, computer_move=computer_move)

    def play_valid_round(self, round_no: int, user_move: GameMove, computer_move: GameMove) -> RoundOutcome:
        self.messenger.display_chosen_move(self.user, user_move)
        self.messenger.display_chosen_move(self.computer, computer_move)
        self._record(
            "MOVES_CHOSEN",
            round_no,
            {"user_move": user_move.label, "computer_move": computer_move.label},
        )

        outcome = resolve_round(user_move, computer_move)
        logger.debug(
            "Round %d: %s vs %s -> %s",
            round_no,
            user_move.label,
            computer_move.label,
            outcome.value,
        )
        self.process_round_result(round_no, outcome)
        return outcome

    def process_round_result(self, round_no: int, outcome: RoundOutcome) -> None:
        if outcome == RoundOutcome.draw:
            self._record("ROUND_DRAW", round_no, {})
            self.messenger.announce_draw()
            return

        winner = self.user if outcome == RoundOutcome.user_win else self.computer
        winner.add_win()
        self._record("ROUND_WON", round_no, {"winner": winner.name, "outcome": outcome.value})
        self.messenger.announce_round_winner(winner)

    def _record(self, type: EventType, round_no: int, payload: dict[str, Any]) -> None:
        self.history.append(MatchEvent.now(type=type, round_no=round_no, payload=payload))
