"""User service - registration, login and account listing use cases."""

from typing import List

import structlog

from loan_gateway.core.metrics import record_login, record_registration
from loan_gateway.domain.entities import User
from loan_gateway.domain.exceptions import (
    DuplicateEmailException,
    InvalidCredentialsException,
    ValidationException,
)
from loan_gateway.domain.interfaces import PasswordHasher, TokenService, UserRepository
from loan_gateway.application.dto import LoginRequest, LoginResult, RegisterRequest, UserSummary

logger = structlog.get_logger(__name__)


class UserService:
    """
    Application service for account use cases.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self._user_repo = user_repository
        self._hasher = password_hasher
        self._tokens = token_service

    async def register(self, request: RegisterRequest) -> User:
        """
        Create an account.

        Args:
            request: Name, email and plaintext password

        Returns:
            The persisted user

        Raises:
            ValidationException: If any field is empty
            DuplicateEmailException: If the email is already registered
        """
        if request.validate():
            raise ValidationException("All fields are required")

        existing = await self._user_repo.get_by_email(request.email)
        if existing is not None:
            record_registration("duplicate")
            logger.info("registration_rejected", reason="duplicate_email")
            raise DuplicateEmailException(request.email)

        password_hash = await self._hasher.hash(request.password)
        user = User(name=request.name, email=request.email, password_hash=password_hash)

        try:
            await self._user_repo.save(user)
        except DuplicateEmailException:
            # Lost a race with a concurrent registration
            record_registration("duplicate")
            raise

        record_registration("success")
        logger.info("user_registered", user_id=user.id)

        return user

    async def login(self, request: LoginRequest) -> LoginResult:
        """
        Exchange credentials for a signed token.

        Raises:
            ValidationException: If email or password is empty
            InvalidCredentialsException: If the email is unknown or the
                password does not match
        """
        if request.validate():
            raise ValidationException("All fields are required")

        user = await self._user_repo.get_by_email(request.email)
        stored_hash = user.password_hash if user is not None else None
        if not await self._hasher.verify(request.password, stored_hash) or user is None:
            record_login("invalid_credentials")
            logger.info("login_failed")
            raise InvalidCredentialsException()

        token = self._tokens.issue(user.id, user.email)

        record_login("success")
        logger.info("login_succeeded", user_id=user.id)

        return LoginResult(token=token, user=UserSummary.from_entity(user))

    async def list_users(self) -> List[UserSummary]:
        """List every account without password hashes."""
        users = await self._user_repo.list_all()
        return [UserSummary.from_entity(user) for user in users]
