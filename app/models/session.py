"""SQLAlchemy model for recorded practice sessions."""

from __future__ import annotations

import uuid
from datetime import datetime

from sqlalchemy import JSON, Column, DateTime, Float, String, Text
from sqlalchemy.dialects.postgresql import UUID

from app.models.base import Base


class PracticeSession(Base):
    __tablename__ = "sessions"

    id = Column(
        UUID(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        nullable=False,
    )
    user_id = Column(
        String(128),
        nullable=True,
        index=True,
    )
    audio_url = Column(
        String(2048),
        nullable=False,
    )
    pitch_data = Column(
        JSON,
        nullable=True,
    )
    feedback = Column(
        Text,
        nullable=True,
    )
    score = Column(
        Float,
        nullable=True,
    )
    duration_seconds = Column(
        Float,
        nullable=True,
    )
    created_at = Column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        index=True,
    )
    updated_at = Column(
        DateTime,
        nullable=False,
        default=datetime.utcnow,
        onupdate=datetime.utcnow,
    )


__all__ = ["PracticeSession"]
