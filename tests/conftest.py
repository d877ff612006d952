from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import pytest

from rpsgame.core.moves import GameMove
from rpsgame.game_loop import SinglePlayerRpsGame
from rpsgame.models import MatchConfig
from rpsgame.players import Player, ScoredPlayer, make_computer_player, make_user_player


@dataclass
class RecordingMessenger:
    """GameMessenger test double: scripted answers, every call recorded in order."""

    move_choices: list[Any] = field(default_factory=list)
    user_name: str = "Alice"
    computer_name: str = "Hal"
    rounds: int = 1
    calls: list[tuple[Any, ...]] = field(default_factory=list)
    # (user score, computer score) as seen by show_final_score.
    final_scores: list[tuple[int, int]] = field(default_factory=list)

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]

    def show_welcome_screen(self) -> None:
        self.calls.append(("show_welcome_screen",))

    def request_user_player_name(self) -> str:
        self.calls.append(("request_user_player_name",))
        return self.user_name

    def request_computer_player_name(self) -> str:
        self.calls.append(("request_computer_player_name",))
        return self.computer_name

    def request_number_of_rounds(self) -> int:
        self.calls.append(("request_number_of_rounds",))
        return self.rounds

    def show_setup_complete(self) -> None:
        self.calls.append(("show_setup_complete",))

    def request_move_choice(self) -> Any:
        self.calls.append(("request_move_choice",))
        return self.move_choices.pop(0)

    def display_chosen_move(self, player: Player, move: GameMove) -> None:
        self.calls.append(("display_chosen_move", player, move))

    def announce_round_winner(self, winner: Player) -> None:
        self.calls.append(("announce_round_winner", winner))

    def announce_draw(self) -> None:
        self.calls.append(("announce_draw",))

    def show_final_score(self, user: Player, computer: Player) -> None:
        self.calls.append(("show_final_score", user, computer))
        self.final_scores.append((user.score, computer.score))

    def show_invalid_input_message(self) -> None:
        self.calls.append(("show_invalid_input_message",))


@dataclass
class ScriptedRandom:
    """Random source returning preset values; 0 -> Rock, 1 -> Paper, 2 -> Scissors."""

    values: list[int]
    draws: int = 0

    def __call__(self) -> int:
        self.draws += 1
        return self.values.pop(0)


@dataclass
class MatchHarness:
    game: SinglePlayerRpsGame
    messenger: RecordingMessenger
    rng: ScriptedRandom
    user: ScoredPlayer
    computer: ScoredPlayer


@pytest.fixture()
def user() -> ScoredPlayer:
    return make_user_player("Alice")


@pytest.fixture()
def computer() -> ScoredPlayer:
    return make_computer_player("Hal")


@pytest.fixture()
def make_match(user: ScoredPlayer, computer: ScoredPlayer) -> Callable[..., MatchHarness]:
    def _make(*, choices: list[Any], random_values: list[int], rounds: int | None = None) -> MatchHarness:
        messenger = RecordingMessenger(move_choices=list(choices))
        rng = ScriptedRandom(values=list(random_values))
        game = SinglePlayerRpsGame(
            user=user,
            computer=computer,
            messenger=messenger,
            config=MatchConfig(rounds=rounds if rounds is not None else len(choices)),
            random_generator=rng,
        )
        return MatchHarness(game=game, messenger=messenger, rng=rng, user=user, computer=computer)

    return _make


@pytest.fixture()
def recording_messenger() -> RecordingMessenger:
    return RecordingMessenger()


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Unset RPS_* variables (restored afterwards) and run from an empty directory without a .env."""

    for key in ("RPS_SEED", "RPS_LOG_LEVEL"):
        # setenv then delenv: teardown removes the key again even if a .env file set it.
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
