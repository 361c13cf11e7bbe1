"""Coaching feedback endpoints.

The heavy lifting lives in `app.pipelines.coaching`; these handlers only
translate requests into a `SessionInput`, shape the response, and write the
summary back onto a stored session when asked to.
"""

import logging

from fastapi import APIRouter
from sqlalchemy.exc import SQLAlchemyError

from app.controllers.dependencies import FeedbackOrchestratorDep, SessionRepositoryDep
from app.pipelines.coaching import SessionInput
from app.views.coaching import (
    AiStatusResponse,
    AnalyzeRequest,
    AnalyzeResponse,
    QuickFeedbackRequest,
    QuickFeedbackResponse,
)

router = APIRouter(prefix="/api/coaching", tags=["coaching"])

logger = logging.getLogger(__name__)

MOCK_MODEL_NAME = "mock"


def _session_input(payload: QuickFeedbackRequest) -> SessionInput:
    return SessionInput(
        score=payload.score,
        pitch_data=payload.pitch_data if payload.pitch_data is not None else {},
        duration_seconds=payload.duration_seconds or 0,
    )


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze_session(
    payload: AnalyzeRequest,
    orchestrator: FeedbackOrchestratorDep,
    repository: SessionRepositoryDep,
) -> AnalyzeResponse:
    """Analyze a session and return detailed coaching feedback."""

    result = await orchestrator.generate_coaching_feedback(_session_input(payload))

    if payload.session_id is not None:
        try:
            updated = await repository.update_session(
                payload.session_id,
                {"feedback": result.feedback.summary},
            )
        except (SQLAlchemyError, OSError) as exc:
            # Feedback is still returned when the session store is unavailable.
            logger.warning(
                "Coaching feedback not stored for session %s: %s",
                payload.session_id,
                exc,
            )
        else:
            if updated is None:
                logger.warning(
                    "Coaching feedback not stored: session %s not found",
                    payload.session_id,
                )

    return AnalyzeResponse(
        coaching=result.feedback,
        using_ai=result.succeeded_via_provider,
        model=result.provider_model_id or MOCK_MODEL_NAME,
        fallback=result.used_fallback,
    )


@router.post("/quick-feedback", response_model=QuickFeedbackResponse)
async def get_quick_feedback(
    payload: QuickFeedbackRequest,
    orchestrator: FeedbackOrchestratorDep,
) -> QuickFeedbackResponse:
    """Return only the summary line of the coaching feedback."""

    feedback = await orchestrator.generate_simple_feedback(_session_input(payload))
    return QuickFeedbackResponse(feedback=feedback)


@router.get("/status", response_model=AiStatusResponse)
async def get_ai_status(orchestrator: FeedbackOrchestratorDep) -> AiStatusResponse:
    """Report whether the coaching model is configured, without calling it."""

    configured = orchestrator.is_configured()
    return AiStatusResponse(
        ai_configured=configured,
        message=(
            "AI coaching is active"
            if configured
            else "Using mock feedback (configure BEDROCK_API_KEY to enable AI)"
        ),
    )
