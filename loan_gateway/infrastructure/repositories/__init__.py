"""Repository implementations."""

from .user_repository import SqlUserRepository
from .loan_repository import SqlLoanRepository

__all__ = [
    "SqlUserRepository",
    "SqlLoanRepository",
]
