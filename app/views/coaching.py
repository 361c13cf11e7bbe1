"""Pydantic schemas for coaching endpoints."""

from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from app.services.response_contract import CoachingFeedback


class QuickFeedbackRequest(BaseModel):
    """Session data needed to produce feedback."""

    score: float = Field(..., description="Overall session score (0-100)")
    pitch_data: Optional[Any] = Field(
        None, description="Opaque pitch analysis payload"
    )
    duration_seconds: Optional[float] = Field(
        None, ge=0, description="Recording duration in seconds"
    )


class AnalyzeRequest(QuickFeedbackRequest):
    """Feedback request that may also update a stored session."""

    session_id: Optional[UUID] = Field(
        None, description="Session whose feedback column receives the summary"
    )


class AnalyzeResponse(BaseModel):
    success: bool = True
    coaching: CoachingFeedback
    using_ai: bool = Field(..., description="Whether the model produced the feedback")
    model: str = Field(..., description="Model id, or 'mock'")
    fallback: bool = Field(..., description="Whether mock feedback replaced a failed call")


class QuickFeedbackResponse(BaseModel):
    success: bool = True
    feedback: str


class AiStatusResponse(BaseModel):
    success: bool = True
    ai_configured: bool
    message: str
