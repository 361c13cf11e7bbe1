"""SQLAlchemy models for the MVC architecture."""

from .base import Base
from .session import PracticeSession  # noqa: F401

__all__ = [
    "Base",
    "PracticeSession",
]
