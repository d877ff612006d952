from __future__ import annotations

from enum import IntEnum
from typing import Any


class GameMove(IntEnum):
    """The three moves. Values match the console selection (1 = Rock, 2 = Paper, 3 = Scissors)."""

    rock = 1
    paper = 2
    scissors = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


def move_from_choice(choice: Any) -> GameMove | None:
    """Map a raw user selection to a move.

    Returns None for anything outside 1..3, including non-integer input.
    Out-of-range and malformed selections are treated the same way.
    """

    if isinstance(choice, bool) or not isinstance(choice, int):
        return None
    try:
        return GameMove(choice)
    except ValueError:
        return None


def move_from_random(value: int) -> GameMove:
    # Reduce modulo 3 and shift into 1..3.
    return GameMove(1 + value % 3)
