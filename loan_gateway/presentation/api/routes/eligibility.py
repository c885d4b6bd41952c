"""AI loan eligibility endpoint."""

from typing import Annotated

from fastapi import APIRouter, Depends

from loan_gateway.application.dto import EligibilityRequest
from loan_gateway.application.services import EligibilityService
from loan_gateway.core.dependencies import get_eligibility_service
from loan_gateway.presentation.middleware import failure_boundary
from loan_gateway.presentation.schemas import (
    EligibilityRequestSchema,
    EligibilityResponseSchema,
    ErrorResponseSchema,
)

eligibility_router = APIRouter()


@eligibility_router.post(
    "/eligibility",
    response_model=EligibilityResponseSchema,
    summary="Check Loan Eligibility",
    description="""
    Ask a generative model whether an applicant is eligible for a loan.

    The model's answer is returned verbatim. It is instructed to reply
    "Eligible" or "Not Eligible" but this is not enforced.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Missing fields"},
        500: {"model": ErrorResponseSchema, "description": "Model call failed"},
    },
)
@failure_boundary("Failed to process AI request, please try again")
async def check_eligibility(
    body: EligibilityRequestSchema,
    eligibility_service: Annotated[EligibilityService, Depends(get_eligibility_service)],
) -> EligibilityResponseSchema:
    result = await eligibility_service.assess(
        EligibilityRequest(
            income=body.income,
            credit_score=body.credit_score,
            employment_status=body.employment_status,
            loan_amount=body.loan_amount,
        )
    )
    return EligibilityResponseSchema(result=result)
