from datetime import datetime
from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel


class PracticeSessionRecord(BaseModel):
    """Domain model for a stored practice session"""
    id: UUID
    user_id: Optional[str] = None
    audio_url: str
    pitch_data: Optional[Any] = None
    feedback: Optional[str] = None
    score: Optional[float] = None
    duration_seconds: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class NewPracticeSession(BaseModel):
    """Fields accepted when inserting a practice session"""
    audio_url: str
    user_id: Optional[str] = None
    pitch_data: Optional[Any] = None
    feedback: Optional[str] = None
    score: Optional[float] = None
    duration_seconds: Optional[float] = None
