from __future__ import annotations

from rpsgame.core.moves import GameMove
from rpsgame.messenger import INVALID_CHOICE
from rpsgame.players import Player


def _first_token(text: str) -> str:
    parts = text.split()
    return parts[0] if parts else ""


def _parse_int(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return INVALID_CHOICE


class ConsoleMessenger:
    """GameMessenger on stdin/stdout via input() and print()."""

    def show_welcome_screen(self) -> None:
        print(" *********************************************")
        print(" **** Welcome to the Rock-Paper-Scissors! ****")
        print(" *********************************************\n")

    def request_user_player_name(self) -> str:
        return _first_token(input("Please enter the user player's name: "))

    def request_computer_player_name(self) -> str:
        return _first_token(input("Please enter the computer player's name: "))

    def request_number_of_rounds(self) -> int:
        return _parse_int(input("How many rounds do you want to play? "))

    def show_setup_complete(self) -> None:
        print("\nGreat, all set!\nLet's get started!\n")

    def request_move_choice(self) -> int:
        return _parse_int(input("Enter your move (1 = Rock, 2 = Paper, 3 = Scissors): "))

    def display_chosen_move(self, player: Player, move: GameMove) -> None:
        print(f"{player.name} chose: {move.label}")

    def announce_round_winner(self, winner: Player) -> None:
        print(f"{winner.name} wins this round!\n")

    def announce_draw(self) -> None:
        print("It's a draw!\n")

    def show_final_score(self, user: Player, computer: Player) -> None:
        print(f"Final Score => {user.name}: {user.score} | {computer.name}: {computer.score}")

    def show_invalid_input_message(self) -> None:
        print("Invalid input!\n")
