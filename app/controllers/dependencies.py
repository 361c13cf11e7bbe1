"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import SessionRepositoryInterface
from app.database import get_session
from app.infrastructure.persistence.repositories_sqlalchemy import (
    SQLAlchemySessionRepository,
)
from app.pipelines.coaching import FeedbackOrchestrator

SessionDep = Annotated[AsyncSession, Depends(get_session)]


def get_session_repository(session: SessionDep) -> SessionRepositoryInterface:
    """Bind the SQLAlchemy repository to the request's database session."""

    return SQLAlchemySessionRepository(session)


def get_feedback_orchestrator(request: Request) -> FeedbackOrchestrator:
    """Return the orchestrator built by the application factory."""

    return request.app.state.feedback_orchestrator


SessionRepositoryDep = Annotated[
    SessionRepositoryInterface, Depends(get_session_repository)
]
FeedbackOrchestratorDep = Annotated[
    FeedbackOrchestrator, Depends(get_feedback_orchestrator)
]


__all__ = [
    "get_feedback_orchestrator",
    "get_session_repository",
    "FeedbackOrchestratorDep",
    "SessionDep",
    "SessionRepositoryDep",
]
