"""Loan service - application and status workflow use cases."""

from typing import List
from uuid import UUID

import structlog

from loan_gateway.core.metrics import record_loan_action, record_loan_application
from loan_gateway.domain.entities import Identity, Loan, LoanAction
from loan_gateway.domain.exceptions import (
    InvalidLoanActionException,
    InvalidLoanIdException,
    LoanNotFoundException,
    ValidationException,
)
from loan_gateway.domain.interfaces import LoanRepository
from loan_gateway.application.dto import (
    LoanActionRequest,
    LoanActionResult,
    LoanApplicationRequest,
    LoanResponse,
)
from loan_gateway.application.dto.common import format_value

logger = structlog.get_logger(__name__)


class LoanService:
    """
    Application service for loan use cases.

    Every authenticated identity may approve or reject any loan; there
    is no role check.
    """

    def __init__(self, loan_repository: LoanRepository):
        self._loan_repo = loan_repository

    async def apply(self, request: LoanApplicationRequest, applicant: Identity) -> LoanResponse:
        """
        Submit a loan application with status Pending.

        Raises:
            ValidationException: If any field is absent or empty
        """
        missing = request.validate()
        if missing:
            raise ValidationException(f"Missing required fields: {', '.join(missing)}")

        loan = Loan(
            amount=format_value(request.amount),
            tenure=format_value(request.tenure),
            income=format_value(request.income),
            purpose=format_value(request.purpose),
        )
        await self._loan_repo.save(loan)

        record_loan_application()
        logger.info("loan_applied", loan_id=loan.id, applicant_id=applicant.user_id)

        return LoanResponse.from_entity(loan)

    async def list_loans(self) -> List[LoanResponse]:
        """List every loan application."""
        loans = await self._loan_repo.list_all()
        return [LoanResponse.from_entity(loan) for loan in loans]

    async def update_status(self, request: LoanActionRequest, actor: Identity) -> LoanActionResult:
        """
        Approve or reject a loan.

        Setting a loan to the status it already has is allowed.

        Raises:
            InvalidLoanActionException: If action is not 'approve' or 'reject'
            InvalidLoanIdException: If the id is not a valid identifier
            LoanNotFoundException: If no loan has that id
        """
        action = self._parse_action(request.action)
        loan_id = self._parse_loan_id(request.loan_id)

        loan = await self._loan_repo.update_status(loan_id, action.target_status)
        if loan is None:
            logger.warning("loan_not_found", loan_id=loan_id)
            raise LoanNotFoundException(loan_id)

        record_loan_action(action.value)
        logger.info(
            "loan_status_updated",
            loan_id=loan_id,
            status=loan.status.value,
            actor_id=actor.user_id,
        )

        return LoanActionResult(
            message=f"Loan {loan.status.value.lower()} successfully",
            loan=LoanResponse.from_entity(loan),
        )

    def _parse_action(self, action: object) -> LoanAction:
        if not isinstance(action, str):
            raise InvalidLoanActionException(action)
        try:
            return LoanAction(action)
        except ValueError as exc:
            raise InvalidLoanActionException(action) from exc

    def _parse_loan_id(self, loan_id: str) -> str:
        try:
            return str(UUID(loan_id))
        except ValueError as exc:
            raise InvalidLoanIdException(loan_id) from exc
