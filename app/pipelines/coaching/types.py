"""Typed containers shared across the coaching pipeline.

Kept in their own module so `mock`, `llm` and `flow` can import them
without circular dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from app.services.response_contract import CoachingFeedback


@dataclass(frozen=True)
class SessionInput:
    """Per-request snapshot of the session being evaluated."""

    score: float
    pitch_data: Any = field(default_factory=dict)
    duration_seconds: float = 0


@dataclass(frozen=True)
class FeedbackResult:
    """Outcome of one orchestration run, including its provenance."""

    succeeded_via_provider: bool
    feedback: CoachingFeedback
    used_fallback: bool
    provider_model_id: str | None = None
    provider_error: str | None = None
    tokens_used: int | None = None

    def __post_init__(self) -> None:
        if self.used_fallback and self.succeeded_via_provider:
            raise ValueError("A fallback result cannot come from the provider")
        if self.provider_model_id is not None and not self.succeeded_via_provider:
            raise ValueError("provider_model_id is only set on provider success")


__all__ = ["FeedbackResult", "SessionInput"]
