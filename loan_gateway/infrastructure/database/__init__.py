"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager, to_async_url
from .models import Base, UserModel, LoanModel

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "to_async_url",
    "Base",
    "UserModel",
    "LoanModel",
]
