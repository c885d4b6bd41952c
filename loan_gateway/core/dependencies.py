"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from loan_gateway.core.config import Settings, get_settings
from loan_gateway.core.metrics import record_auth_failure
from loan_gateway.domain.entities import Identity
from loan_gateway.domain.exceptions import InvalidTokenException, MissingTokenException
from loan_gateway.domain.interfaces import (
    EligibilityModelClient,
    LoanRepository,
    PasswordHasher,
    TokenService,
    UserRepository,
)
from loan_gateway.infrastructure.database import get_db_session
from loan_gateway.infrastructure.repositories import SqlLoanRepository, SqlUserRepository
from loan_gateway.infrastructure.clients import HttpGeminiClient
from loan_gateway.infrastructure.security import BcryptPasswordHasher, JwtTokenService
from loan_gateway.application.services import EligibilityService, LoanService, UserService

# auto_error=False so a missing header maps to our own 401 body
bearer_scheme = HTTPBearer(auto_error=False)


# Repository dependencies
async def get_user_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> UserRepository:
    """Get a UserRepository instance."""
    return SqlUserRepository(session)


async def get_loan_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> LoanRepository:
    """Get a LoanRepository instance."""
    return SqlLoanRepository(session)


# Security dependencies
def get_password_hasher(
    settings: Annotated[Settings, Depends(get_settings)],
) -> PasswordHasher:
    """Get a PasswordHasher instance."""
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def get_token_service(
    settings: Annotated[Settings, Depends(get_settings)],
) -> TokenService:
    """Get a TokenService instance."""
    return JwtTokenService.from_settings(settings)


# External client dependencies
def get_eligibility_model_client(
    settings: Annotated[Settings, Depends(get_settings)],
) -> EligibilityModelClient:
    """Get an EligibilityModelClient instance."""
    return HttpGeminiClient.from_settings(settings)


# Authentication
def get_current_identity(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> Identity:
    """
    Resolve the caller from the Authorization bearer token.

    Raises:
        MissingTokenException: No bearer token was sent (401)
        InvalidTokenException: The token failed verification (403)
    """
    if credentials is None or not credentials.credentials:
        record_auth_failure("missing_token")
        raise MissingTokenException()

    try:
        return token_service.verify(credentials.credentials)
    except InvalidTokenException as exc:
        record_auth_failure(f"{exc.reason}_token")
        raise


# Service dependencies
async def get_user_service(
    user_repo: Annotated[UserRepository, Depends(get_user_repository)],
    password_hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    token_service: Annotated[TokenService, Depends(get_token_service)],
) -> UserService:
    """Get a UserService instance with all dependencies."""
    return UserService(
        user_repository=user_repo,
        password_hasher=password_hasher,
        token_service=token_service,
    )


async def get_loan_service(
    loan_repo: Annotated[LoanRepository, Depends(get_loan_repository)],
) -> LoanService:
    """Get a LoanService instance."""
    return LoanService(loan_repository=loan_repo)


def get_eligibility_service(
    model_client: Annotated[EligibilityModelClient, Depends(get_eligibility_model_client)],
) -> EligibilityService:
    """Get an EligibilityService instance."""
    return EligibilityService(model_client=model_client)
