"""
Integration tests for service-level behaviour.

These tests verify:
1. Root banner and health check
2. Request ID propagation into headers and error bodies
3. Unexpected faults never leak internal details
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from loan_gateway.core.dependencies import get_user_repository
from loan_gateway.infrastructure.database import get_db_session
from loan_gateway.main import app


class TestServiceEndpoints:
    """Tests for GET / and GET /health."""

    @pytest.mark.asyncio
    async def test_root_banner(self, client: AsyncClient):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.text == "Loan Eligibility AI & User Auth API is running..."
        assert response.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_health(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["service"] == "loan-gateway"
        assert data["database"] == "ok"

    @pytest.mark.asyncio
    async def test_health_reports_unreachable_database(self, client: AsyncClient):
        class UnreachableSession:
            async def execute(self, statement):
                raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        async def override_get_db_session():
            yield UnreachableSession()

        app.dependency_overrides[get_db_session] = override_get_db_session

        response = await client.get("/health")

        assert response.status_code == 503
        assert response.json()["status"] == "degraded"
        assert response.json()["database"] == "unreachable"


class TestRequestContext:
    """Tests for X-Request-ID handling."""

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client: AsyncClient):
        response = await client.get("/health")

        assert response.headers.get("X-Request-ID")

    @pytest.mark.asyncio
    async def test_request_id_echoed(self, client: AsyncClient):
        response = await client.get("/health", headers={"X-Request-ID": "trace-123"})

        assert response.headers["X-Request-ID"] == "trace-123"

    @pytest.mark.asyncio
    async def test_request_id_in_error_body(self, client: AsyncClient):
        response = await client.get("/loan-status", headers={"X-Request-ID": "trace-456"})

        assert response.status_code == 401
        assert response.json() == {
            "error": "Access Denied",
            "code": "ACCESS_DENIED",
            "request_id": "trace-456",
        }


class TestFailureBoundary:
    """Unexpected faults map to the endpoint's fixed message."""

    @pytest.mark.asyncio
    async def test_list_users_failure(self, client: AsyncClient):
        class BrokenUserRepository:
            async def list_all(self):
                raise RuntimeError("password=hunter2 in connection string")

        app.dependency_overrides[get_user_repository] = lambda: BrokenUserRepository()

        response = await client.get("/users")

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to retrieve users"
        assert "hunter2" not in response.text

    @pytest.mark.asyncio
    async def test_login_failure(self, client: AsyncClient):
        class BrokenUserRepository:
            async def get_by_email(self, email):
                raise ConnectionError("database is down")

        app.dependency_overrides[get_user_repository] = lambda: BrokenUserRepository()

        response = await client.post("/login", json={
            "email": "asha@example.com",
            "password": "correct-horse-battery",
        })

        assert response.status_code == 500
        assert response.json()["error"] == "Login failed, please try again"
