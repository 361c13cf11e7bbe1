"""Provider stage of the coaching pipeline: prompt, invoke, normalize."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from app.services.llm_client import BedrockLlmClient, LlmCompletion
from app.services.prompt_builder import build_coaching_prompt
from app.services.response_contract import NormalizedFeedback, normalize_response
from app.telemetry import record_degraded_response

from .types import SessionInput

logger = logging.getLogger("app.services.coaching")


@dataclass(frozen=True)
class CoachingLlmOutcome:
    completion: LlmCompletion
    normalized: NormalizedFeedback


def _truncate(value: str, max_length: int = 500) -> str:
    if len(value) <= max_length:
        return value
    return value[: max_length - 3] + "..."


async def call_coaching_llm(
    client: BedrockLlmClient,
    session: SessionInput,
    *,
    max_tokens: int | None = None,
) -> CoachingLlmOutcome:
    """Invoke the model once and normalize whatever text it returns.

    Provider errors propagate as `LlmInvocationError`; unparseable text does
    not, it comes back as a `DegradedFeedback`.
    """

    prompt = build_coaching_prompt(
        score=session.score,
        duration_seconds=session.duration_seconds,
        pitch_data=session.pitch_data,
    )
    completion = await client.invoke(user_prompt=prompt, max_tokens=max_tokens)

    normalized = normalize_response(completion.text)
    if normalized.degraded:
        record_degraded_response()
        logger.warning(
            "Coaching response could not be parsed (%s): %s",
            normalized.reason,
            _truncate(completion.text),
        )

    return CoachingLlmOutcome(completion=completion, normalized=normalized)


__all__ = ["CoachingLlmOutcome", "call_coaching_llm"]
