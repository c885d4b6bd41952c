"""SQLAlchemy implementation of UserRepository."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from loan_gateway.domain.entities import User
from loan_gateway.domain.exceptions import DuplicateEmailException
from loan_gateway.domain.interfaces import UserRepository
from loan_gateway.infrastructure.database.models import UserModel


class SqlUserRepository(UserRepository):
    """
    SQL implementation of the User repository.

    Uses SQLAlchemy async session for database operations. Writes are
    committed before returning, so a stored user is visible to the next
    request. Email uniqueness is enforced by a unique index; a violation
    surfaces as DuplicateEmailException.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, user: User) -> User:
        """Persist a user to the database."""
        model = UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
        )

        self._session.add(model)
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            raise DuplicateEmailException(user.email) from exc

        return user

    async def get_by_email(self, email: str) -> Optional[User]:
        """Retrieve a user by email."""
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def list_all(self) -> List[User]:
        """Retrieve all users ordered by creation time."""
        stmt = select(UserModel).order_by(UserModel.created_at.asc())
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: UserModel) -> User:
        """Convert database model to domain entity."""
        return User(
            id=str(model.id),
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )
