"""Coaching feedback pipeline package.

Modules follow the order in which `/api/coaching/analyze` executes:

1. `tiers` – classify the session score into a performance tier.
2. `mock` – deterministic tier-based feedback used as the fallback.
3. `llm` – build the prompt, call Bedrock and normalize the reply.
4. `flow` – the orchestrator that decides between the two paths.
"""

from .flow import FeedbackOrchestrator
from .llm import CoachingLlmOutcome, call_coaching_llm
from .mock import generate_mock_feedback
from .tiers import PerformanceTier, classify_score
from .types import FeedbackResult, SessionInput

__all__ = [
    "CoachingLlmOutcome",
    "FeedbackOrchestrator",
    "FeedbackResult",
    "PerformanceTier",
    "SessionInput",
    "call_coaching_llm",
    "classify_score",
    "generate_mock_feedback",
]
