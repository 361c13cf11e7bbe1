"""FastAPI routers acting as controllers in the MVC architecture."""

from . import coaching, sessions

__all__ = ["coaching", "sessions"]
