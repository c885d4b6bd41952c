"""Loan application domain entities."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4


class LoanStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class LoanAction(str, Enum):
    """Status transitions an operator can request."""

    APPROVE = "approve"
    REJECT = "reject"

    @property
    def target_status(self) -> LoanStatus:
        if self is LoanAction.APPROVE:
            return LoanStatus.APPROVED
        return LoanStatus.REJECTED


@dataclass
class Loan:
    """
    A loan application.

    Amount, tenure and income are kept in the text form the applicant
    submitted them in.
    """

    amount: str
    tenure: str
    income: str
    purpose: str
    status: LoanStatus = LoanStatus.PENDING
    id: str = field(default_factory=lambda: str(uuid4()))
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime | None = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "amount": self.amount,
            "tenure": self.tenure,
            "income": self.income,
            "purpose": self.purpose,
            "status": self.status.value,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
