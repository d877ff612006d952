from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class MatchConfig(BaseModel):
    """Fixed for the lifetime of a match."""

    model_config = ConfigDict(frozen=True)

    rounds: int = Field(..., ge=1)


class SessionSetup(BaseModel):
    """What the console collects before a match starts."""

    model_config = ConfigDict(frozen=True)

    user_name: str = Field(..., min_length=1)
    computer_name: str = Field(..., min_length=1)
    rounds: int = Field(..., ge=1)

    def match_config(self) -> MatchConfig:
        return MatchConfig(rounds=self.rounds)


class MatchPhase(StrEnum):
    awaiting_moves = "awaiting_moves"
    invalid_move = "invalid_move"
    valid_moves = "valid_moves"
    round_complete = "round_complete"
    finished = "finished"
