"""Data transfer objects for AI eligibility checks."""

from dataclasses import dataclass
from typing import List

from .common import FieldValue, missing_fields


@dataclass(frozen=True)
class EligibilityRequest:
    """Applicant details forwarded to the generative model."""

    income: FieldValue
    credit_score: FieldValue
    employment_status: FieldValue
    loan_amount: FieldValue

    def validate(self) -> List[str]:
        return missing_fields(
            [
                ("income", self.income),
                ("creditScore", self.credit_score),
                ("employmentStatus", self.employment_status),
                ("loanAmount", self.loan_amount),
            ]
        )
