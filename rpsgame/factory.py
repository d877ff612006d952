from __future__ import annotations

import logging
from collections.abc import Callable
from enum import StrEnum
from typing import Protocol

logger = logging.getLogger(__name__)


class GameMode(StrEnum):
    console_single_player = "console_single_player"


class GameSession(Protocol):
    def play(self) -> None:  # pragma: no cover
        ...


CreatorFunc = Callable[[], GameSession]


class GameSessionFactory:
    """Creates game sessions from creators registered per GameMode."""

    def __init__(self) -> None:
        self._registry: dict[GameMode, CreatorFunc] = {}

    def register_game(self, mode: GameMode | str, creator: CreatorFunc) -> None:
        # Registering a mode again replaces the previous creator.
        self._registry[GameMode(mode)] = creator

    def create(self, mode: GameMode | str) -> GameSession | None:
        creator = self._registry.get(GameMode(mode))
        if creator is None:
            logger.warning("No game registered for mode %s", mode)
            return None
        return creator()
