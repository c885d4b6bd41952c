"""Domain Entities - Core business objects."""

from .identity import Identity
from .loan import Loan, LoanAction, LoanStatus
from .user import User

__all__ = [
    "Identity",
    "Loan",
    "LoanAction",
    "LoanStatus",
    "User",
]
