"""Loan application and status endpoints. All require a bearer token."""

from dataclasses import asdict
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from loan_gateway.application.dto import LoanActionRequest, LoanApplicationRequest
from loan_gateway.application.services import LoanService
from loan_gateway.core.dependencies import get_current_identity, get_loan_service
from loan_gateway.domain.entities import Identity
from loan_gateway.presentation.middleware import failure_boundary
from loan_gateway.presentation.schemas import (
    ErrorResponseSchema,
    LoanActionResponseSchema,
    LoanActionSchema,
    LoanApplicationSchema,
    LoanListResponseSchema,
    LoanSchema,
    LoanSubmittedResponseSchema,
)

loan_router = APIRouter(
    responses={
        401: {"model": ErrorResponseSchema, "description": "No bearer token"},
        403: {"model": ErrorResponseSchema, "description": "Invalid or expired token"},
        500: {"model": ErrorResponseSchema, "description": "Database unavailable"},
    },
)


@loan_router.post(
    "/apply-loan",
    response_model=LoanSubmittedResponseSchema,
    summary="Apply for a Loan",
    description="Submit a loan application. New loans always start as Pending.",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Missing fields"},
    },
)
@failure_boundary("Failed to apply for a loan")
async def apply_loan(
    body: LoanApplicationSchema,
    identity: Annotated[Identity, Depends(get_current_identity)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanSubmittedResponseSchema:
    loan = await loan_service.apply(
        LoanApplicationRequest(
            amount=body.amount,
            tenure=body.tenure,
            income=body.income,
            purpose=body.purpose,
        ),
        applicant=identity,
    )

    return LoanSubmittedResponseSchema(
        message="Loan Application Submitted",
        loan=LoanSchema(**asdict(loan)),
    )


@loan_router.get(
    "/loan-status",
    response_model=LoanListResponseSchema,
    summary="List Loans",
    description="List every loan application with its current status.",
)
@failure_boundary("Failed to fetch loans")
async def loan_status(
    identity: Annotated[Identity, Depends(get_current_identity)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanListResponseSchema:
    loans = await loan_service.list_loans()
    return LoanListResponseSchema(loans=[LoanSchema(**asdict(loan)) for loan in loans])


@loan_router.put(
    "/loan-action/{loan_id}",
    response_model=LoanActionResponseSchema,
    summary="Approve or Reject a Loan",
    description="""
    Set a loan's status to Approved or Rejected.

    Repeating the same action is allowed and leaves the status unchanged.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Invalid action or loan ID"},
        404: {"model": ErrorResponseSchema, "description": "Loan not found"},
    },
)
@failure_boundary("Failed to update loan status")
async def loan_action(
    loan_id: Annotated[str, Path(description="ID of the loan to update")],
    body: LoanActionSchema,
    identity: Annotated[Identity, Depends(get_current_identity)],
    loan_service: Annotated[LoanService, Depends(get_loan_service)],
) -> LoanActionResponseSchema:
    result = await loan_service.update_status(
        LoanActionRequest(loan_id=loan_id, action=body.action),
        actor=identity,
    )

    return LoanActionResponseSchema(
        message=result.message,
        loan=LoanSchema(**asdict(result.loan)),
    )
