"""
Domain Interfaces (Ports)
"""

from .repositories import UserRepository, LoanRepository
from .clients import EligibilityModelClient
from .security import PasswordHasher, TokenService

__all__ = [
    "UserRepository",
    "LoanRepository",
    "EligibilityModelClient",
    "PasswordHasher",
    "TokenService",
]
