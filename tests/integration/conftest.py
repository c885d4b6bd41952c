"""
Fixtures for integration tests.

Provides:
- Test client for FastAPI app
- Mock generative model client
- In-memory database for testing
- Registered user and bearer token helpers
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from loan_gateway.main import app
from loan_gateway.core.dependencies import get_eligibility_model_client
from loan_gateway.infrastructure.database import Base, get_db_session
from tests.fakes import MockEligibilityModelClient


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


# =============================================================================
# Mock Client Fixtures
# =============================================================================

@pytest.fixture
def mock_model_client() -> MockEligibilityModelClient:
    """Create a model client that answers "Eligible"."""
    return MockEligibilityModelClient()


@pytest.fixture
def failing_model_client() -> MockEligibilityModelClient:
    """Create a model client that always fails."""
    return MockEligibilityModelClient(fail_mode=True)


# =============================================================================
# App Client Fixtures
# =============================================================================

def _override_dependencies(session: AsyncSession, model_client: MockEligibilityModelClient) -> None:
    async def override_get_db_session():
        yield session

    def override_get_eligibility_model_client():
        return model_client

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_eligibility_model_client] = override_get_eligibility_model_client


@pytest_asyncio.fixture
async def client(
    test_session: AsyncSession,
    mock_model_client: MockEligibilityModelClient,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client with mocked dependencies.

    This client:
    - Uses an in-memory SQLite database
    - Mocks the generative model with a canned answer
    """
    _override_dependencies(test_session, mock_model_client)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def client_with_failing_model(
    test_session: AsyncSession,
    failing_model_client: MockEligibilityModelClient,
) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client where the generative model always fails."""
    _override_dependencies(test_session, failing_model_client)

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def registration_body() -> dict:
    """Request body for a new account."""
    return {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "password": "correct-horse-battery",
    }


@pytest.fixture
def loan_application_body() -> dict:
    """Request body for a loan application."""
    return {
        "amount": "500000",
        "tenure": "36",
        "income": "85000",
        "purpose": "Home renovation",
    }


@pytest_asyncio.fixture
async def auth_token(client: AsyncClient, registration_body: dict) -> str:
    """Register a user, log in, and return the bearer token."""
    response = await client.post("/register", json=registration_body)
    assert response.status_code == 200

    response = await client.post("/login", json={
        "email": registration_body["email"],
        "password": registration_body["password"],
    })
    assert response.status_code == 200

    return response.json()["token"]


@pytest.fixture
def auth_headers(auth_token: str) -> dict:
    """Authorization header carrying a valid bearer token."""
    return {"Authorization": f"Bearer {auth_token}"}
