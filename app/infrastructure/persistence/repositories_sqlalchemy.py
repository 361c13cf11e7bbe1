from datetime import datetime
from typing import Any, List, Mapping, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces import SessionRepositoryInterface
from app.domain.models import NewPracticeSession, PracticeSessionRecord
from app.models.session import PracticeSession
from app.services.practice_stats import SessionSnapshot

# Columns the API may never overwrite through a partial update.
IMMUTABLE_FIELDS = frozenset({"id", "created_at", "updated_at"})


class SQLAlchemySessionRepository(SessionRepositoryInterface):
    """SQLAlchemy implementation of the practice session repository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _get_entity(self, session_id: UUID) -> Optional[PracticeSession]:
        result = await self.session.execute(
            select(PracticeSession).where(PracticeSession.id == session_id)
        )
        return result.scalar_one_or_none()

    async def insert_session(self, session: NewPracticeSession) -> PracticeSessionRecord:
        db_session = PracticeSession(**session.model_dump())
        self.session.add(db_session)
        await self.session.commit()
        await self.session.refresh(db_session)
        return PracticeSessionRecord.model_validate(db_session)

    async def select_sessions(
        self,
        *,
        user_id: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[PracticeSessionRecord]:
        query = select(PracticeSession)
        if user_id:
            query = query.where(PracticeSession.user_id == user_id)
        query = (
            query.order_by(PracticeSession.created_at.desc())
            .offset(offset)
            .limit(limit)
        )

        result = await self.session.execute(query)
        rows = result.scalars().all()
        return [PracticeSessionRecord.model_validate(row) for row in rows]

    async def select_session_by_id(self, session_id: UUID) -> Optional[PracticeSessionRecord]:
        db_session = await self._get_entity(session_id)
        return PracticeSessionRecord.model_validate(db_session) if db_session else None

    async def update_session(
        self,
        session_id: UUID,
        fields: Mapping[str, Any],
    ) -> Optional[PracticeSessionRecord]:
        db_session = await self._get_entity(session_id)
        if db_session is None:
            return None

        for name, value in fields.items():
            if name in IMMUTABLE_FIELDS or not hasattr(PracticeSession, name):
                continue
            setattr(db_session, name, value)
        db_session.updated_at = datetime.utcnow()

        await self.session.commit()
        await self.session.refresh(db_session)
        return PracticeSessionRecord.model_validate(db_session)

    async def delete_session(self, session_id: UUID) -> bool:
        db_session = await self._get_entity(session_id)
        if db_session:
            await self.session.delete(db_session)
            await self.session.commit()
            return True
        return False

    async def list_for_stats(self, user_id: str) -> List[SessionSnapshot]:
        result = await self.session.execute(
            select(PracticeSession.score, PracticeSession.duration_seconds)
            .where(PracticeSession.user_id == user_id)
        )
        return [
            SessionSnapshot(score=row.score, duration_seconds=row.duration_seconds)
            for row in result
        ]
