from __future__ import annotations

from enum import StrEnum

from rpsgame.core.moves import GameMove


class RoundOutcome(StrEnum):
    draw = "draw"
    user_win = "user_win"
    computer_win = "computer_win"


# move -> the move it beats
BEATS: dict[GameMove, GameMove] = {
    GameMove.rock: GameMove.scissors,
    GameMove.paper: GameMove.rock,
    GameMove.scissors: GameMove.paper,
}


def resolve_round(user_move: GameMove, computer_move: GameMove) -> RoundOutcome:
    """Decide a single round.

    Pure and total: callers only pass validated moves.
    """

    if user_move == computer_move:
        return RoundOutcome.draw
    if BEATS[user_move] == computer_move:
        return RoundOutcome.user_win
    return RoundOutcome.computer_win
