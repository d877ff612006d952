from __future__ import annotations

import argparse
import logging
import random

from pydantic import ValidationError

from rpsgame.console import ConsoleMessenger
from rpsgame.factory import GameMode, GameSessionFactory
from rpsgame.game_loop import RandomGenerator, SinglePlayerRpsGame
from rpsgame.messenger import GameMessenger
from rpsgame.models import SessionSetup
from rpsgame.players import make_computer_player, make_user_player
from rpsgame.settings import SettingsError, load_settings

logger = logging.getLogger(__name__)

# Raw draws are reduced modulo 3 by the match loop.
RANDOM_UPPER_BOUND = 2**31 - 1

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="rps", description="Play Rock-Paper-Scissors against the computer.")
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's moves (overrides RPS_SEED)")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (overrides RPS_LOG_LEVEL)",
    )
    return p.parse_args(argv)


def make_random_generator(seed: int | None) -> RandomGenerator:
    rng = random.Random(seed)

    def _next() -> int:
        return rng.randint(0, RANDOM_UPPER_BOUND)

    return _next


def request_setup(messenger: GameMessenger) -> SessionSetup | None:
    """Ask for both names and the number of rounds.

    Returns None (after telling the user why) when the answers cannot start a match.
    """

    user_name = messenger.request_user_player_name()
    computer_name = messenger.request_computer_player_name()
    rounds = messenger.request_number_of_rounds()
    if rounds < 1:
        print("Invalid number of rounds. Exiting...")
        return None

    try:
        return SessionSetup(user_name=user_name, computer_name=computer_name, rounds=rounds)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        print(f"Invalid game setup ({fields}). Exiting...")
        return None


def build_factory(*, setup: SessionSetup, messenger: GameMessenger, seed: int | None) -> GameSessionFactory:
    factory = GameSessionFactory()
    factory.register_game(
        GameMode.console_single_player,
        lambda: SinglePlayerRpsGame(
            user=make_user_player(setup.user_name),
            computer=make_computer_player(setup.computer_name),
            messenger=messenger,
            config=setup.match_config(),
            random_generator=make_random_generator(seed),
        ),
    )
    return factory


def run(*, messenger: GameMessenger, seed: int | None) -> int:
    messenger.show_welcome_screen()

    setup = request_setup(messenger)
    if setup is None:
        return 1

    messenger.show_setup_complete()

    factory = build_factory(setup=setup, messenger=messenger, seed=seed)
    session = factory.create(GameMode.console_single_player)
    if session is None:
        print("Failed to create game session.")
        return 1

    logger.info("Starting %d round(s) (seed=%s)", setup.rounds, seed)
    session.play()
    return 0


def main(argv: list[str] | None = None, *, messenger: GameMessenger | None = None) -> int:
    args = parse_args(argv)

    try:
        settings = load_settings()
    except SettingsError as e:
        raise SystemExit(f"Configuration error: {e}") from e

    logging.basicConfig(level=args.log_level or settings.log_level)
    seed = args.seed if args.seed is not None else settings.seed

    if messenger is None:
        messenger = ConsoleMessenger()

    try:
        return run(messenger=messenger, seed=seed)
    except (EOFError, KeyboardInterrupt):
        print("\nExiting early.")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
