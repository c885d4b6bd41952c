"""Data transfer objects for loan operations."""

from dataclasses import dataclass
from typing import Any, List, Optional

from loan_gateway.domain.entities import Loan
from .common import FieldValue, blank_fields


@dataclass(frozen=True)
class LoanApplicationRequest:
    """Input data for a new loan application."""

    amount: FieldValue
    tenure: FieldValue
    income: FieldValue
    purpose: FieldValue

    def validate(self) -> List[str]:
        return blank_fields(
            [
                ("amount", self.amount),
                ("tenure", self.tenure),
                ("income", self.income),
                ("purpose", self.purpose),
            ]
        )


@dataclass(frozen=True)
class LoanActionRequest:
    """Input data for approving or rejecting a loan."""

    loan_id: str
    action: Optional[Any]


@dataclass(frozen=True)
class LoanResponse:
    """Response data for a single loan."""

    id: str
    amount: str
    tenure: str
    income: str
    purpose: str
    status: str
    created_at: str
    updated_at: Optional[str]

    @classmethod
    def from_entity(cls, loan: Loan) -> "LoanResponse":
        return cls(**loan.to_dict())


@dataclass(frozen=True)
class LoanActionResult:
    """Outcome of a status change."""

    message: str
    loan: LoanResponse
