"""Pydantic schemas for API request/response validation."""

from .user import (
    RegisterRequestSchema,
    LoginRequestSchema,
    LoginResponseSchema,
    MessageResponseSchema,
    UserSchema,
    UserListItemSchema,
)
from .loan import (
    LoanApplicationSchema,
    LoanActionSchema,
    LoanSchema,
    LoanSubmittedResponseSchema,
    LoanListResponseSchema,
    LoanActionResponseSchema,
)
from .eligibility import EligibilityRequestSchema, EligibilityResponseSchema
from .error import ErrorResponseSchema

__all__ = [
    "RegisterRequestSchema",
    "LoginRequestSchema",
    "LoginResponseSchema",
    "MessageResponseSchema",
    "UserSchema",
    "UserListItemSchema",
    "LoanApplicationSchema",
    "LoanActionSchema",
    "LoanSchema",
    "LoanSubmittedResponseSchema",
    "LoanListResponseSchema",
    "LoanActionResponseSchema",
    "EligibilityRequestSchema",
    "EligibilityResponseSchema",
    "ErrorResponseSchema",
]
