"""Pydantic models for validating the coaching LLM's JSON responses.

The model is asked for a strict JSON document, but replies often arrive
wrapped in Markdown fences or surrounded by prose. `normalize_response`
extracts the first JSON object it can decode and validates it against
`CoachingFeedback`. When that is not possible the raw text is kept as the
summary and the outcome is tagged as degraded, so callers can tell the two
apart without re-inspecting the payload.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, Optional, Union

from pydantic import AliasChoices, BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

DEGRADED_ENCOURAGEMENT = "Keep practicing!"
DEGRADED_NEXT_SESSION_FOCUS = "Continue working on the areas mentioned above."


class ExerciseRecommendation(BaseModel):
    name: str
    description: str
    instructions: str

    model_config = {"extra": "ignore"}


class CoachingFeedback(BaseModel):
    summary: str
    strengths: list[str]
    areas_to_improve: list[str] = Field(
        validation_alias=AliasChoices("areas_to_improve", "areasToImprove"),
    )
    recommended_exercises: list[ExerciseRecommendation] = Field(
        validation_alias=AliasChoices("recommended_exercises", "recommendedExercises"),
    )
    encouragement: str
    next_session_focus: str = Field(
        validation_alias=AliasChoices("next_session_focus", "nextSessionFocus"),
    )

    model_config = {"populate_by_name": True, "extra": "ignore"}


@dataclass(frozen=True)
class ParsedFeedback:
    """Provider output that validated against the feedback schema."""

    feedback: CoachingFeedback
    degraded = False


@dataclass(frozen=True)
class DegradedFeedback:
    """Provider output that could not be parsed; the raw text became the summary."""

    feedback: CoachingFeedback
    raw_text: str
    reason: str
    degraded = True


NormalizedFeedback = Union[ParsedFeedback, DegradedFeedback]


def _extract_json_object(payload: str) -> Optional[dict[str, Any]]:
    """Return the first decodable JSON object embedded in ``payload``."""

    decoder = json.JSONDecoder()
    start = payload.find("{")
    while start != -1:
        try:
            candidate, _ = decoder.raw_decode(payload, start)
        except json.JSONDecodeError:
            candidate = None
        if isinstance(candidate, dict):
            return candidate
        start = payload.find("{", start + 1)
    return None


def degraded_feedback(raw_text: str) -> CoachingFeedback:
    """Wrap unstructured text in a schema-complete feedback object."""

    return CoachingFeedback(
        summary=raw_text,
        strengths=[],
        areas_to_improve=[],
        recommended_exercises=[],
        encouragement=DEGRADED_ENCOURAGEMENT,
        next_session_focus=DEGRADED_NEXT_SESSION_FOCUS,
    )


def normalize_response(raw_text: str) -> NormalizedFeedback:
    """Parse the provider's reply into feedback; never raises."""

    text = raw_text or ""
    data = _extract_json_object(text)
    if data is None:
        return DegradedFeedback(
            feedback=degraded_feedback(text),
            raw_text=text,
            reason="no JSON object found in response",
        )

    try:
        feedback = CoachingFeedback.model_validate(data)
    except ValidationError as exc:
        logger.debug("Coaching response failed schema validation: %s", exc)
        return DegradedFeedback(
            feedback=degraded_feedback(text),
            raw_text=text,
            reason=f"{exc.error_count()} schema validation error(s)",
        )

    return ParsedFeedback(feedback=feedback)


__all__ = [
    "CoachingFeedback",
    "DEGRADED_ENCOURAGEMENT",
    "DEGRADED_NEXT_SESSION_FOCUS",
    "DegradedFeedback",
    "ExerciseRecommendation",
    "NormalizedFeedback",
    "ParsedFeedback",
    "degraded_feedback",
    "normalize_response",
]
