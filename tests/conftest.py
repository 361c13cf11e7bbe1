"""Shared fixtures and fakes for the test-suite."""

from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path
import sys
from typing import Any, List, Mapping, Optional
from uuid import UUID, uuid4

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from app.application.interfaces import SessionRepositoryInterface  # noqa: E402
from app.domain.models import NewPracticeSession, PracticeSessionRecord  # noqa: E402
from app.pipelines.coaching import SessionInput  # noqa: E402
from app.services.llm_client import LlmCompletion, LlmInvocationError  # noqa: E402
from app.services.practice_stats import SessionSnapshot  # noqa: E402


class FakeLlmClient:
    """Stand-in for `BedrockLlmClient` that never touches the network."""

    def __init__(
        self,
        *,
        configured: bool = True,
        text: str = "",
        error: BaseException | None = None,
        model_id: str = "fake-model",
        input_tokens: int | None = 120,
        output_tokens: int | None = 80,
    ) -> None:
        self.configured = configured
        self.text = text
        self.error = error
        self.model_id = model_id
        self.input_tokens = input_tokens
        self.output_tokens = output_tokens
        self.calls: list[dict[str, Any]] = []

    def is_configured(self) -> bool:
        return self.configured

    async def invoke(self, *, user_prompt: str, system_prompt=None, max_tokens=None, temperature=None):
        self.calls.append({"user_prompt": user_prompt, "max_tokens": max_tokens})
        if self.error is not None:
            raise self.error
        return LlmCompletion(
            text=self.text,
            model_id=self.model_id,
            input_tokens=self.input_tokens,
            output_tokens=self.output_tokens,
        )


class InMemorySessionRepository(SessionRepositoryInterface):
    """Dictionary-backed repository honouring the SQLAlchemy adapter's contract."""

    def __init__(self) -> None:
        self.records: dict[UUID, PracticeSessionRecord] = {}
        self._clock = datetime(2024, 1, 1, 12, 0, 0)

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    async def insert_session(self, session: NewPracticeSession) -> PracticeSessionRecord:
        now = self._tick()
        record = PracticeSessionRecord(
            id=uuid4(),
            created_at=now,
            updated_at=now,
            **session.model_dump(),
        )
        self.records[record.id] = record
        return record

    async def select_sessions(
        self,
        *,
        user_id: Optional[str] = None,
        limit: int = 50,
        offset: int = 0,
    ) -> List[PracticeSessionRecord]:
        rows = [
            record
            for record in self.records.values()
            if not user_id or record.user_id == user_id
        ]
        rows.sort(key=lambda record: record.created_at, reverse=True)
        return rows[offset:offset + limit]

    async def select_session_by_id(self, session_id: UUID) -> Optional[PracticeSessionRecord]:
        return self.records.get(session_id)

    async def update_session(
        self,
        session_id: UUID,
        fields: Mapping[str, Any],
    ) -> Optional[PracticeSessionRecord]:
        record = self.records.get(session_id)
        if record is None:
            return None
        changes = {
            name: value
            for name, value in fields.items()
            if name not in {"id", "created_at", "updated_at"}
        }
        updated = record.model_copy(update={**changes, "updated_at": self._tick()})
        self.records[session_id] = updated
        return updated

    async def delete_session(self, session_id: UUID) -> bool:
        return self.records.pop(session_id, None) is not None

    async def list_for_stats(self, user_id: str) -> List[SessionSnapshot]:
        return [
            SessionSnapshot(score=record.score, duration_seconds=record.duration_seconds)
            for record in self.records.values()
            if record.user_id == user_id
        ]


VALID_PROVIDER_JSON = """{
  "summary": "Solid session with a steady middle register.",
  "strengths": ["Stable sustained notes", "Clean onsets"],
  "areas_to_improve": ["Sharp on the top of the scale"],
  "recommended_exercises": [
    {
      "name": "Lip Trills",
      "description": "Relaxes the larynx across registers",
      "instructions": "Trill on a five-note scale, ascending by half steps."
    }
  ],
  "encouragement": "Great consistency, keep it up!",
  "next_session_focus": "Approach high notes with lighter breath pressure."
}"""


@pytest.fixture
def session_input() -> SessionInput:
    return SessionInput(
        score=82,
        pitch_data={"notes": [{"expected": "C4", "sung": "C4", "cents_off": 4}]},
        duration_seconds=45,
    )


@pytest.fixture
def repository() -> InMemorySessionRepository:
    return InMemorySessionRepository()


__all__ = ["FakeLlmClient", "InMemorySessionRepository", "LlmInvocationError", "VALID_PROVIDER_JSON"]
