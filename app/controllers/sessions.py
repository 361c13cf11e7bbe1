"""Practice session CRUD and progress statistics endpoints."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, HTTPException, Query, status

from app.controllers.dependencies import SessionRepositoryDep
from app.domain.models import NewPracticeSession
from app.services.practice_stats import aggregate_practice_stats
from app.views.common import ErrorResponse, SuccessResponse
from app.views.sessions import (
    Pagination,
    SessionCreateRequest,
    SessionListResponse,
    SessionResponse,
    SessionUpdateRequest,
    UserStatsResponse,
)

router = APIRouter(prefix="/api/sessions", tags=["sessions"])

logger = logging.getLogger(__name__)

LimitQuery = Annotated[int, Query(ge=1, le=100)]
OffsetQuery = Annotated[int, Query(ge=0)]

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


def _session_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Session not found",
    )


@router.get("/", response_model=SessionListResponse)
async def list_sessions(
    repository: SessionRepositoryDep,
    user_id: Optional[str] = None,
    limit: LimitQuery = 50,
    offset: OffsetQuery = 0,
) -> SessionListResponse:
    """Return sessions newest first, optionally filtered by user."""

    sessions = await repository.select_sessions(
        user_id=user_id,
        limit=limit,
        offset=offset,
    )
    return SessionListResponse(
        data=sessions,
        count=len(sessions),
        pagination=Pagination(limit=limit, offset=offset),
    )


@router.post(
    "/",
    response_model=SessionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_session(
    payload: SessionCreateRequest,
    repository: SessionRepositoryDep,
) -> SessionResponse:
    """Store a finished recording and whatever analysis came with it."""

    record = await repository.insert_session(
        NewPracticeSession(**payload.model_dump())
    )
    logger.info("Session created id=%s user=%s", record.id, record.user_id)
    return SessionResponse(message="Session created successfully", data=record)


@router.get("/user/{user_id}/stats", response_model=UserStatsResponse)
async def get_user_stats(
    user_id: str,
    repository: SessionRepositoryDep,
) -> UserStatsResponse:
    """Aggregate practice statistics over all of a user's sessions."""

    snapshots = await repository.list_for_stats(user_id)
    return UserStatsResponse(data=aggregate_practice_stats(snapshots))


@router.get("/{session_id}", response_model=SessionResponse, responses=_NOT_FOUND)
async def get_session(
    session_id: UUID,
    repository: SessionRepositoryDep,
) -> SessionResponse:
    record = await repository.select_session_by_id(session_id)
    if record is None:
        raise _session_not_found()
    return SessionResponse(data=record)


@router.put("/{session_id}", response_model=SessionResponse, responses=_NOT_FOUND)
async def update_session(
    session_id: UUID,
    payload: SessionUpdateRequest,
    repository: SessionRepositoryDep,
) -> SessionResponse:
    """Apply a partial update; only fields present in the body change."""

    record = await repository.update_session(
        session_id,
        payload.model_dump(exclude_unset=True),
    )
    if record is None:
        raise _session_not_found()
    return SessionResponse(message="Session updated successfully", data=record)


@router.delete("/{session_id}", response_model=SuccessResponse, responses=_NOT_FOUND)
async def delete_session(
    session_id: UUID,
    repository: SessionRepositoryDep,
) -> SuccessResponse:
    deleted = await repository.delete_session(session_id)
    if not deleted:
        raise _session_not_found()
    logger.info("Session deleted id=%s", session_id)
    return SuccessResponse(message="Session deleted successfully")
