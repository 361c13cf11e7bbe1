"""Coaching feedback orchestration.

Each call walks the same short state machine:

1. ``ConfigCheck`` – without a real Bedrock credential, go straight to mock
   feedback.
2. ``ProviderCall`` – build the prompt, call the model once (no retries,
   bounded by the client's timeout) and normalize the reply.
3. ``ProviderError`` – any failure in step 2 is logged, counted and turned
   into mock feedback carrying the error message.

The caller always receives a complete `FeedbackResult`; only cancellation
escapes this module.
"""

from __future__ import annotations

import logging

from app.services.llm_client import BedrockLlmClient
from app.telemetry import (
    record_feedback_source,
    record_provider_failure,
    record_provider_usage,
)

from .llm import call_coaching_llm
from .mock import generate_mock_feedback
from .types import FeedbackResult, SessionInput

logger = logging.getLogger("app.services.coaching")

SOURCE_PROVIDER = "provider"
SOURCE_MOCK_UNCONFIGURED = "mock_unconfigured"
SOURCE_MOCK_PROVIDER_ERROR = "mock_provider_error"


class FeedbackOrchestrator:
    """Produce coaching feedback from Bedrock, degrading to mock feedback."""

    def __init__(
        self,
        llm_client: BedrockLlmClient,
        *,
        max_tokens: int = 1024,
    ) -> None:
        self._llm_client = llm_client
        self._max_tokens = max_tokens

    def is_configured(self) -> bool:
        return self._llm_client.is_configured()

    async def generate_coaching_feedback(self, session: SessionInput) -> FeedbackResult:
        if not self.is_configured():
            logger.info("Bedrock API key not configured. Using mock feedback.")
            record_feedback_source(SOURCE_MOCK_UNCONFIGURED)
            return FeedbackResult(
                succeeded_via_provider=False,
                feedback=generate_mock_feedback(session),
                used_fallback=True,
            )

        try:
            outcome = await call_coaching_llm(
                self._llm_client,
                session,
                max_tokens=self._max_tokens,
            )
        except Exception as exc:
            logger.warning("Coaching model call failed, using mock feedback: %s", exc)
            record_provider_failure()
            record_feedback_source(SOURCE_MOCK_PROVIDER_ERROR)
            return FeedbackResult(
                succeeded_via_provider=False,
                feedback=generate_mock_feedback(session),
                used_fallback=True,
                provider_error=str(exc) or exc.__class__.__name__,
            )

        completion = outcome.completion
        record_provider_usage(completion.input_tokens, completion.output_tokens)
        record_feedback_source(SOURCE_PROVIDER)
        logger.info(
            "Coaching feedback generated model=%s tokens=%s degraded=%s",
            completion.model_id,
            completion.tokens_used,
            outcome.normalized.degraded,
        )
        return FeedbackResult(
            succeeded_via_provider=True,
            feedback=outcome.normalized.feedback,
            used_fallback=False,
            provider_model_id=completion.model_id,
            tokens_used=completion.tokens_used,
        )

    async def generate_simple_feedback(self, session: SessionInput) -> str:
        """Run the full orchestration and keep only the summary."""

        result = await self.generate_coaching_feedback(session)
        return result.feedback.summary


__all__ = ["FeedbackOrchestrator"]
