"""The input/output capability the game depends on.

A messenger owns every prompt and message, for a particular medium (console, tests, ...).
"""
from __future__ import annotations

from typing import Protocol

from rpsgame.core.moves import GameMove
from rpsgame.players import Player

# Returned by request_* methods when the typed value is not an integer.
INVALID_CHOICE = -1


class GameMessenger(Protocol):
    def show_welcome_screen(self) -> None:  # pragma: no cover
        ...

    def request_user_player_name(self) -> str:  # pragma: no cover
        ...

    def request_computer_player_name(self) -> str:  # pragma: no cover
        ...

    def request_number_of_rounds(self) -> int:  # pragma: no cover
        ...

    def show_setup_complete(self) -> None:  # pragma: no cover
        ...

    def request_move_choice(self) -> int:  # pragma: no cover
        """Return 1 = Rock, 2 = Paper, 3 = Scissors; anything else is an invalid move."""
        ...

    def display_chosen_move(self, player: Player, move: GameMove) -> None:  # pragma: no cover
        ...

    def announce_round_winner(self, winner: Player) -> None:  # pragma: no cover
        ...

    def announce_draw(self) -> None:  # pragma: no cover
        ...

    def show_final_score(self, user: Player, computer: Player) -> None:  # pragma: no cover
        ...

    def show_invalid_input_message(self) -> None:  # pragma: no cover
        ...
