"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException, ValidationException, DependencyException
from .user import DuplicateEmailException, InvalidCredentialsException
from .auth import MissingTokenException, InvalidTokenException
from .loan import (
    LoanNotFoundException,
    InvalidLoanActionException,
    InvalidLoanIdException,
)
from .eligibility import EligibilityModelException

__all__ = [
    "DomainException",
    "ValidationException",
    "DependencyException",
    "DuplicateEmailException",
    "InvalidCredentialsException",
    "MissingTokenException",
    "InvalidTokenException",
    "LoanNotFoundException",
    "InvalidLoanActionException",
    "InvalidLoanIdException",
    "EligibilityModelException",
]
