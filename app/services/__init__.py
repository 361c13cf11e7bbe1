"""Service layer helpers for external integrations."""

from .llm_client import (
    BedrockLlmClient,
    LlmCompletion,
    LlmInvocationError,
    is_placeholder_api_key,
)
from .practice_stats import PracticeStats, SessionSnapshot, aggregate_practice_stats
from .prompt_builder import build_coaching_prompt
from .response_contract import (
    CoachingFeedback,
    DegradedFeedback,
    ExerciseRecommendation,
    ParsedFeedback,
    normalize_response,
)

__all__ = [
    "BedrockLlmClient",
    "LlmCompletion",
    "LlmInvocationError",
    "is_placeholder_api_key",
    "PracticeStats",
    "SessionSnapshot",
    "aggregate_practice_stats",
    "build_coaching_prompt",
    "CoachingFeedback",
    "DegradedFeedback",
    "ExerciseRecommendation",
    "ParsedFeedback",
    "normalize_response",
]
