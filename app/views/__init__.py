"""Pydantic schemas used as views in the MVC architecture."""

from .coaching import (
    AiStatusResponse,
    AnalyzeRequest,
    AnalyzeResponse,
    QuickFeedbackRequest,
    QuickFeedbackResponse,
)
from .common import ErrorResponse, SuccessResponse
from .sessions import (
    Pagination,
    SessionCreateRequest,
    SessionListResponse,
    SessionResponse,
    SessionUpdateRequest,
    UserStatsResponse,
)

__all__ = [
    "AiStatusResponse",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "QuickFeedbackRequest",
    "QuickFeedbackResponse",
    "ErrorResponse",
    "SuccessResponse",
    "Pagination",
    "SessionCreateRequest",
    "SessionListResponse",
    "SessionResponse",
    "SessionUpdateRequest",
    "UserStatsResponse",
]
