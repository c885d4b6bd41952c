"""Eligibility check Pydantic schemas."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field

TextOrNumber = Optional[Union[str, int, float]]


class EligibilityRequestSchema(BaseModel):
    """Schema for POST /eligibility request body."""

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "income": 85000,
                    "creditScore": 760,
                    "employmentStatus": "Salaried",
                    "loanAmount": 500000,
                }
            ]
        },
    )

    income: TextOrNumber = Field(None, description="Monthly income in rupees")
    credit_score: TextOrNumber = Field(None, alias="creditScore")
    employment_status: TextOrNumber = Field(None, alias="employmentStatus")
    loan_amount: TextOrNumber = Field(None, alias="loanAmount")


class EligibilityResponseSchema(BaseModel):
    result: str = Field(
        ...,
        description="The model's answer, returned verbatim",
        examples=["Eligible"],
    )
