"""Application services (use cases)."""

from .user_service import UserService
from .loan_service import LoanService
from .eligibility_service import EligibilityService, build_prompt

__all__ = [
    "UserService",
    "LoanService",
    "EligibilityService",
    "build_prompt",
]
