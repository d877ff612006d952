from __future__ import annotations

import pytest

from rpsgame.factory import GameMode, GameSessionFactory


class _DummySession:
    def __init__(self) -> None:
        self.played = False

    def play(self) -> None:
        self.played = True


def test_registered_mode_creates_session() -> None:
    factory = GameSessionFactory()
    factory.register_game(GameMode.console_single_player, _DummySession)

    session = factory.create(GameMode.console_single_player)

    assert isinstance(session, _DummySession)
    session.play()
    assert session.played


def test_each_create_calls_the_creator() -> None:
    factory = GameSessionFactory()
    factory.register_game(GameMode.console_single_player, _DummySession)

    assert factory.create("console_single_player") is not factory.create(GameMode.console_single_player)


def test_unregistered_mode_returns_none() -> None:
    assert GameSessionFactory().create(GameMode.console_single_player) is None


def test_register_again_replaces_creator() -> None:
    factory = GameSessionFactory()
    first = _DummySession()
    second = _DummySession()
    factory.register_game(GameMode.console_single_player, lambda: first)
    factory.register_game(GameMode.console_single_player, lambda: second)

    assert factory.create(GameMode.console_single_player) is second


def test_unknown_mode_name_raises() -> None:
    with pytest.raises(ValueError):
        GameSessionFactory().create("network_multiplayer")
