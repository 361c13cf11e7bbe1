from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional
from uuid import UUID

from app.domain.models import NewPracticeSession, PracticeSessionRecord
from app.services.practice_stats import SessionSnapshot


class SessionRepositoryInterface(ABC):
    """Persistence contract for practice sessions"""

    @abstractmethod
    async def insert_session(self, session: NewPracticeSession) -> PracticeSessionRecord:
        ...

    @abstractmethod
    async def select_sessions(
        self,
        *,
        user_id: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[PracticeSessionRecord]:
        """Newest first."""
        ...

    @abstractmethod
    async def select_session_by_id(self, session_id: UUID) -> Optional[PracticeSessionRecord]:
        ...

    @abstractmethod
    async def update_session(
        self,
        session_id: UUID,
        fields: Mapping[str, Any],
    ) -> Optional[PracticeSessionRecord]:
        ...

    @abstractmethod
    async def delete_session(self, session_id: UUID) -> bool:
        ...

    @abstractmethod
    async def list_for_stats(self, user_id: str) -> List[SessionSnapshot]:
        ...
