"""Loan-related Pydantic schemas."""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field

TextOrNumber = Optional[Union[str, int, float]]


class LoanApplicationSchema(BaseModel):
    """Schema for POST /apply-loan request body."""

    amount: TextOrNumber = Field(None, examples=["500000"])
    tenure: TextOrNumber = Field(None, description="Tenure in months", examples=["36"])
    income: TextOrNumber = Field(None, examples=["85000"])
    purpose: TextOrNumber = Field(None, examples=["Home renovation"])


class LoanActionSchema(BaseModel):
    """Schema for PUT /loan-action/{id} request body."""

    action: Optional[Any] = Field(
        None,
        description="Either 'approve' or 'reject'",
        examples=["approve"],
    )


class LoanSchema(BaseModel):
    """Schema for a loan in responses."""

    id: str
    amount: str
    tenure: str
    income: str
    purpose: str
    status: str = Field(..., examples=["Pending"])
    created_at: str
    updated_at: Optional[str] = None


class LoanSubmittedResponseSchema(BaseModel):
    message: str = Field(..., examples=["Loan Application Submitted"])
    loan: LoanSchema


class LoanListResponseSchema(BaseModel):
    loans: list[LoanSchema]


class LoanActionResponseSchema(BaseModel):
    message: str = Field(..., examples=["Loan approved successfully"])
    loan: LoanSchema
