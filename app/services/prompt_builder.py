"""Helpers to construct the coaching prompt sent to the LLM.

Given a session's score, duration and pitch payload, we emit a single user
prompt containing the coach persona, the session data, the hidden analysis
steps, and the strict JSON contract parsed by `response_contract`.
"""

from __future__ import annotations

import json
from typing import Any

COACH_PERSONA = (
    "You are an expert vocal coach with years of experience. You're analyzing "
    "a singing session and need to provide constructive, encouraging feedback."
)

# Shown to the model in this order; the intermediate results stay hidden.
ANALYSIS_STEPS: tuple[tuple[str, str], ...] = (
    (
        "Pattern Analysis",
        "What patterns do you notice in the pitch accuracy? Are they consistent "
        "or inconsistent? Better on certain notes?",
    ),
    (
        "Root Cause",
        "Based on the patterns, what is likely causing any issues? "
        "(breath support, tension, range limitations, etc.)",
    ),
    (
        "Strengths",
        "What did they do well? Be specific and encouraging.",
    ),
    (
        "Improvement Areas",
        "What's the main thing they should focus on?",
    ),
    (
        "Exercise Recommendation",
        "What specific vocal exercise would help most?",
    ),
)

OUTPUT_CONTRACT = """{
  "summary": "Brief overall assessment (2-3 sentences)",
  "strengths": ["strength 1", "strength 2"],
  "areas_to_improve": ["area 1", "area 2"],
  "recommended_exercises": [
    {
      "name": "Exercise name",
      "description": "What it helps with",
      "instructions": "How to do it"
    }
  ],
  "encouragement": "Personal encouraging message",
  "next_session_focus": "What to focus on next time"
}"""


def _format_number(value: float) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _format_pitch_data(pitch_data: Any) -> str:
    return json.dumps(
        pitch_data if pitch_data is not None else {},
        ensure_ascii=False,
        indent=2,
        default=str,
    )


def build_coaching_prompt(
    *,
    score: float,
    duration_seconds: float,
    pitch_data: Any,
) -> str:
    """Compose the single-turn prompt for one practice session."""

    steps = "\n\n".join(
        f"{idx}. **{title}**: {question}"
        for idx, (title, question) in enumerate(ANALYSIS_STEPS, start=1)
    )

    return (
        f"{COACH_PERSONA}\n\n"
        "**Session Data:**\n"
        f"- Overall Score: {_format_number(score)}/100\n"
        f"- Recording Duration: {_format_number(duration_seconds)} seconds\n"
        f"- Pitch Data: {_format_pitch_data(pitch_data)}\n\n"
        "**Your Task:**\n"
        "Analyze this singing session using your expertise as a vocal coach. "
        "Follow these steps in your thinking (but don't show these steps to the student):\n\n"
        f"{steps}\n\n"
        "Now provide your coaching feedback in a warm, encouraging tone. "
        "Structure your response as JSON with exactly these fields and types:\n\n"
        f"{OUTPUT_CONTRACT}\n\n"
        "Only return the final JSON object. Do not include the analysis steps "
        "or any text before or after the JSON.\n\n"
        "Remember: Be specific, encouraging, and actionable. The student wants to improve!"
    )


__all__ = ["ANALYSIS_STEPS", "COACH_PERSONA", "OUTPUT_CONTRACT", "build_coaching_prompt"]
