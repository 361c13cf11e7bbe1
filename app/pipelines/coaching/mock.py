"""Deterministic, network-free coaching feedback keyed on score tier.

Used when Bedrock is not configured, when the provider call fails, and
whenever a caller wants feedback without waiting on the model.
"""

from __future__ import annotations

from dataclasses import dataclass

from app.services.response_contract import CoachingFeedback, ExerciseRecommendation

from .tiers import PerformanceTier, classify_score
from .types import SessionInput


@dataclass(frozen=True)
class TierTemplate:
    summary: str
    strengths: tuple[str, ...]
    areas_to_improve: tuple[str, ...]
    encouragement: str


TIER_TEMPLATES: dict[PerformanceTier, TierTemplate] = {
    PerformanceTier.EXCELLENT: TierTemplate(
        summary=(
            "Excellent performance! Your pitch accuracy is outstanding "
            "and shows great vocal control."
        ),
        strengths=(
            "Exceptional pitch accuracy",
            "Strong breath support",
            "Consistent tone quality",
        ),
        areas_to_improve=(
            "Explore expanding your vocal range",
            "Work on dynamic variation",
        ),
        encouragement="You're doing amazingly well! Keep pushing your boundaries.",
    ),
    PerformanceTier.GOOD: TierTemplate(
        summary=(
            "Good job! You demonstrate solid vocal fundamentals "
            "with room for refinement."
        ),
        strengths=(
            "Good overall pitch control",
            "Decent breath management",
        ),
        areas_to_improve=(
            "Improve accuracy on higher notes",
            "Work on sustaining longer phrases",
        ),
        encouragement=(
            "You're making great progress! Consistent practice will take you "
            "to the next level."
        ),
    ),
    PerformanceTier.FAIR: TierTemplate(
        summary=(
            "You're on the right track! Focus on the fundamentals "
            "to build a stronger foundation."
        ),
        strengths=(
            "Good effort and persistence",
            "Some accurate note transitions",
        ),
        areas_to_improve=(
            "Strengthen breath support",
            "Work on pitch accuracy",
            "Practice scales regularly",
        ),
        encouragement="Every great singer started where you are. Keep practicing daily!",
    ),
    PerformanceTier.IMPROVING: TierTemplate(
        summary=(
            "Great start! Let's focus on building your fundamentals "
            "with simple exercises."
        ),
        strengths=(
            "You're taking the first steps",
            "Willingness to practice",
        ),
        areas_to_improve=(
            "Master basic breath control",
            "Practice matching single notes",
            "Build confidence",
        ),
        encouragement="Remember, every expert was once a beginner. You've got this!",
    ),
}

RECOMMENDED_EXERCISES: tuple[ExerciseRecommendation, ...] = (
    ExerciseRecommendation(
        name="Breathing Exercise - Hiss Technique",
        description="Builds diaphragm strength and breath control",
        instructions=(
            "1. Stand up straight\n"
            "2. Take a deep breath through your nose\n"
            "3. Exhale slowly making a 'sssss' sound\n"
            "4. Try to sustain for 20 seconds\n"
            "5. Repeat 5 times daily"
        ),
    ),
    ExerciseRecommendation(
        name="Pitch Matching",
        description="Improves accuracy by matching reference tones",
        instructions=(
            "1. Play a note on piano or app\n"
            "2. Sing 'ah' to match the pitch\n"
            "3. Hold steady for 5 seconds\n"
            "4. Practice with C4, D4, E4, F4, G4"
        ),
    ),
)

NEXT_SESSION_FOCUS = "Focus on breath control and matching single notes accurately."


def generate_mock_feedback(session: SessionInput) -> CoachingFeedback:
    """Build tier-specific feedback for the session's score."""

    template = TIER_TEMPLATES[classify_score(session.score)]
    return CoachingFeedback(
        summary=template.summary,
        strengths=list(template.strengths),
        areas_to_improve=list(template.areas_to_improve),
        recommended_exercises=[
            exercise.model_copy() for exercise in RECOMMENDED_EXERCISES
        ],
        encouragement=template.encouragement,
        next_session_focus=NEXT_SESSION_FOCUS,
    )


__all__ = [
    "NEXT_SESSION_FOCUS",
    "RECOMMENDED_EXERCISES",
    "TIER_TEMPLATES",
    "TierTemplate",
    "generate_mock_feedback",
]
