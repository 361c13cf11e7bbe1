"""Practice progress statistics over a user's session history."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from pydantic import BaseModel, Field


@dataclass(frozen=True)
class SessionSnapshot:
    """The two columns of a stored session that statistics are built from."""

    score: Optional[float] = None
    duration_seconds: Optional[float] = None


class PracticeStats(BaseModel):
    total_sessions: int = Field(..., description="All sessions, scored or not")
    average_score: float = Field(..., description="Mean score, one decimal")
    best_score: float = Field(..., description="Highest score recorded")
    total_practice_time_seconds: int = Field(..., description="Summed duration")
    total_practice_time_minutes: int = Field(..., description="Summed duration, rounded")


def _round_half_up(value: float, places: int = 0) -> Decimal:
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def aggregate_practice_stats(sessions: Iterable[SessionSnapshot]) -> PracticeStats:
    """Reduce a snapshot of sessions to a single progress summary.

    Any objects exposing ``score`` and ``duration_seconds`` attributes are
    accepted, so ORM rows can be passed directly. The input is not modified.
    """

    snapshot = list(sessions)
    scores = [session.score for session in snapshot if session.score is not None]

    average_score = 0.0
    best_score: float = 0
    if scores:
        average_score = float(_round_half_up(sum(scores) / len(scores), 1))
        best_score = max(scores)

    total_seconds = sum(session.duration_seconds or 0 for session in snapshot)

    return PracticeStats(
        total_sessions=len(snapshot),
        average_score=average_score,
        best_score=best_score,
        total_practice_time_seconds=int(_round_half_up(total_seconds)),
        total_practice_time_minutes=int(_round_half_up(total_seconds / 60)),
    )


__all__ = ["PracticeStats", "SessionSnapshot", "aggregate_practice_stats"]
