from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Literal

EventType = Literal[
    "ROUND_STARTED",
    "MOVE_INVALID",
    "MOVES_CHOSEN",
    "ROUND_DRAW",
    "ROUND_WON",
    "MATCH_FINISHED",
]


@dataclass(frozen=True, slots=True)
class MatchEvent:
    type: EventType
    round_no: int
    payload: dict[str, Any]
    ts: datetime

    @staticmethod
    def now(*, type: EventType, round_no: int, payload: dict[str, Any]) -> "MatchEvent":
        return MatchEvent(type=type, round_no=round_no, payload=payload, ts=datetime.now(timezone.utc))
