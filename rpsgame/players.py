from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

USER_PREFIX = "[User] "
COMPUTER_PREFIX = "[Computer] "


class Player(Protocol):
    """A match participant: a fixed display name plus a win counter."""

    @property
    def name(self) -> str:  # pragma: no cover
        ...

    @property
    def score(self) -> int:  # pragma: no cover
        ...

    def add_win(self) -> None:  # pragma: no cover
        ...


@dataclass(slots=True, eq=False)
class ScoredPlayer:
    name: str
    score: int = 0

    def add_win(self) -> None:
        self.score += 1


def make_user_player(name: str) -> ScoredPlayer:
    """Create the human participant, e.g. `[User] Alice`."""

    return ScoredPlayer(name=USER_PREFIX + name)


def make_computer_player(name: str) -> ScoredPlayer:
    return ScoredPlayer(name=COMPUTER_PREFIX + name)
