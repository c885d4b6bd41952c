"""Data Transfer Objects for application layer."""

from .user import RegisterRequest, LoginRequest, LoginResult, UserSummary
from .loan import LoanApplicationRequest, LoanActionRequest, LoanActionResult, LoanResponse
from .eligibility import EligibilityRequest

__all__ = [
    "RegisterRequest",
    "LoginRequest",
    "LoginResult",
    "UserSummary",
    "LoanApplicationRequest",
    "LoanActionRequest",
    "LoanActionResult",
    "LoanResponse",
    "EligibilityRequest",
]
