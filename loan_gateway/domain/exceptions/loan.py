"""Loan-related domain exceptions."""

from .base import DomainException


class LoanNotFoundException(DomainException):
    """Raised when a loan cannot be found."""

    def __init__(self, loan_id: str):
        super().__init__(
            message="Loan not found",
            code="LOAN_NOT_FOUND",
        )
        self.loan_id = loan_id


class InvalidLoanActionException(DomainException):
    """Raised when a status action is neither 'approve' nor 'reject'."""

    def __init__(self, action: object):
        super().__init__(
            message="Invalid action. Use 'approve' or 'reject'.",
            code="INVALID_LOAN_ACTION",
        )
        self.action = action


class InvalidLoanIdException(DomainException):
    """Raised when a loan ID is not a syntactically valid identifier."""

    def __init__(self, loan_id: str):
        super().__init__(
            message="Invalid loan ID",
            code="INVALID_LOAN_ID",
        )
        self.loan_id = loan_id
