"""SQLAlchemy implementation of LoanRepository."""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from loan_gateway.domain.entities import Loan, LoanStatus
from loan_gateway.domain.interfaces import LoanRepository
from loan_gateway.infrastructure.database.models import LoanModel


class SqlLoanRepository(LoanRepository):
    """SQL-backed loan repository. Each write is committed before returning."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, loan: Loan) -> Loan:
        model = LoanModel(
            id=loan.id,
            amount=loan.amount,
            tenure=loan.tenure,
            income=loan.income,
            purpose=loan.purpose,
            status=loan.status.value,
            created_at=loan.created_at,
            updated_at=loan.updated_at,
        )

        self._session.add(model)
        await self._session.commit()

        return loan

    async def list_all(self) -> List[Loan]:
        stmt = select(LoanModel).order_by(LoanModel.created_at.asc())
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def update_status(self, loan_id: str, status: LoanStatus) -> Optional[Loan]:
        stmt = select(LoanModel).where(LoanModel.id == loan_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        model.status = status.value
        model.updated_at = datetime.now(timezone.utc)

        await self._session.commit()

        return self._to_entity(model)

    def _to_entity(self, model: LoanModel) -> Loan:
        return Loan(
            id=str(model.id),
            amount=model.amount,
            tenure=model.tenure,
            income=model.income,
            purpose=model.purpose,
            status=LoanStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
