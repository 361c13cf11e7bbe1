"""Pydantic schemas for practice session endpoints."""

from typing import Any, Optional

from pydantic import BaseModel, Field

from app.domain.models import PracticeSessionRecord
from app.services.practice_stats import PracticeStats


class SessionCreateRequest(BaseModel):
    audio_url: str = Field(..., min_length=1, description="Location of the recording")
    user_id: Optional[str] = None
    pitch_data: Optional[Any] = None
    feedback: Optional[str] = None
    score: Optional[float] = None
    duration_seconds: Optional[float] = Field(None, ge=0)


class SessionUpdateRequest(BaseModel):
    """Partial update; only the fields sent are written."""

    audio_url: Optional[str] = None
    user_id: Optional[str] = None
    pitch_data: Optional[Any] = None
    feedback: Optional[str] = None
    score: Optional[float] = None
    duration_seconds: Optional[float] = Field(None, ge=0)

    model_config = {"extra": "ignore"}


class Pagination(BaseModel):
    limit: int
    offset: int


class SessionResponse(BaseModel):
    success: bool = True
    message: Optional[str] = None
    data: PracticeSessionRecord


class SessionListResponse(BaseModel):
    success: bool = True
    data: list[PracticeSessionRecord]
    count: int
    pagination: Pagination


class UserStatsResponse(BaseModel):
    success: bool = True
    data: PracticeStats
