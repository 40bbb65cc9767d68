"""Reusable FastAPI dependencies."""

from .database import get_db_session
from .session import get_current_user_id

__all__ = [
    "get_db_session",
    "get_current_user_id",
]
