"""
Integration tests for the per-request database lifecycle.

These run the real application lifespan against a SQLite file, with no
dependency overrides, and verify:
1. Tables are created at startup
2. Writes are committed before the response, so the next request sees them
3. A failed commit is a 500 with the endpoint's message and saves nothing
"""

from typing import AsyncGenerator
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from loan_gateway.core.config import get_settings
from loan_gateway.main import app


@pytest_asyncio.fixture
async def live_client(tmp_path, monkeypatch) -> AsyncGenerator[AsyncClient, None]:
    """Client for the app started through its own lifespan on a file database."""
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'loans.db'}")
    get_settings.cache_clear()
    app.dependency_overrides.clear()

    try:
        async with app.router.lifespan_context(app):
            transport = ASGITransport(app=app)
            async with AsyncClient(transport=transport, base_url="http://test") as ac:
                yield ac
    finally:
        get_settings.cache_clear()


def failing_commit():
    return patch.object(
        AsyncSession,
        "commit",
        new=AsyncMock(side_effect=OperationalError("COMMIT", {}, Exception("disk I/O error"))),
    )


async def register_and_login(client: AsyncClient, registration_body: dict) -> dict:
    response = await client.post("/register", json=registration_body)
    assert response.status_code == 200

    response = await client.post("/login", json={
        "email": registration_body["email"],
        "password": registration_body["password"],
    })
    assert response.status_code == 200

    return {"Authorization": f"Bearer {response.json()['token']}"}


class TestStartup:

    @pytest.mark.asyncio
    async def test_tables_created_and_reachable(self, live_client: AsyncClient):
        response = await live_client.get("/health")

        assert response.status_code == 200
        assert response.json()["database"] == "ok"
        assert response.json()["service"] == "loan-gateway"


class TestCommittedWrites:

    @pytest.mark.asyncio
    async def test_register_then_login_in_separate_requests(
        self,
        live_client: AsyncClient,
        registration_body: dict,
    ):
        headers = await register_and_login(live_client, registration_body)

        assert headers["Authorization"].startswith("Bearer ")

    @pytest.mark.asyncio
    async def test_loan_status_change_persists(
        self,
        live_client: AsyncClient,
        registration_body: dict,
        loan_application_body: dict,
    ):
        headers = await register_and_login(live_client, registration_body)

        applied = await live_client.post("/apply-loan", json=loan_application_body, headers=headers)
        loan_id = applied.json()["loan"]["id"]
        await live_client.put(f"/loan-action/{loan_id}", json={"action": "reject"}, headers=headers)

        response = await live_client.get("/loan-status", headers=headers)

        assert [loan["status"] for loan in response.json()["loans"]] == ["Rejected"]


class TestFailedCommit:

    @pytest.mark.asyncio
    async def test_register_commit_failure(
        self,
        live_client: AsyncClient,
        registration_body: dict,
    ):
        with failing_commit():
            response = await live_client.post("/register", json=registration_body)

        assert response.status_code == 500
        assert response.json()["error"] == "Registration failed, please try again"
        assert "disk I/O" not in response.text

        users = await live_client.get("/users")
        assert users.json() == []

    @pytest.mark.asyncio
    async def test_apply_loan_commit_failure(
        self,
        live_client: AsyncClient,
        registration_body: dict,
        loan_application_body: dict,
    ):
        headers = await register_and_login(live_client, registration_body)

        with failing_commit():
            response = await live_client.post(
                "/apply-loan",
                json=loan_application_body,
                headers=headers,
            )

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to apply for a loan"

        listing = await live_client.get("/loan-status", headers=headers)
        assert listing.json()["loans"] == []
