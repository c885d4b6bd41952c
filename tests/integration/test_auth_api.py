"""
Integration tests for the account endpoints.

These tests verify:
1. POST /register - Create an account, reject duplicates and missing fields
2. POST /login - Issue a token, never reveal whether an email exists
3. GET /users - List accounts without password hashes
"""

import pytest
from httpx import AsyncClient

from loan_gateway.core.dependencies import get_user_repository
from loan_gateway.main import app


# =============================================================================
# POST /register Tests
# =============================================================================

class TestRegister:
    """Tests for POST /register endpoint."""

    @pytest.mark.asyncio
    async def test_register_success(
        self,
        client: AsyncClient,
        registration_body: dict,
    ):
        response = await client.post("/register", json=registration_body)

        assert response.status_code == 200
        assert response.json() == {"message": "Registration successful"}

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(
        self,
        client: AsyncClient,
        registration_body: dict,
    ):
        """The second registration with the same email fails and creates no record."""
        first = await client.post("/register", json=registration_body)
        assert first.status_code == 200

        second = await client.post("/register", json={
            **registration_body,
            "name": "Someone Else",
        })

        assert second.status_code == 400
        assert second.json()["error"] == "Email already registered"
        assert second.json()["code"] == "EMAIL_ALREADY_REGISTERED"

        users = (await client.get("/users")).json()
        assert len(users) == 1
        assert users[0]["name"] == registration_body["name"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["name", "email", "password"])
    async def test_missing_field_rejected(
        self,
        client: AsyncClient,
        registration_body: dict,
        missing: str,
    ):
        body = {k: v for k, v in registration_body.items() if k != missing}

        response = await client.post("/register", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "All fields are required"

    @pytest.mark.asyncio
    async def test_empty_field_rejected(
        self,
        client: AsyncClient,
        registration_body: dict,
    ):
        response = await client.post("/register", json={**registration_body, "password": ""})

        assert response.status_code == 400
        assert response.json()["error"] == "All fields are required"

    @pytest.mark.asyncio
    async def test_malformed_body_is_400(self, client: AsyncClient):
        response = await client.post(
            "/register",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.asyncio
    async def test_database_failure_returns_500(
        self,
        client: AsyncClient,
        registration_body: dict,
    ):
        """Unexpected store errors become a fixed 500 message."""

        class BrokenUserRepository:
            async def get_by_email(self, email):
                raise RuntimeError("connection reset by peer")

        app.dependency_overrides[get_user_repository] = lambda: BrokenUserRepository()

        response = await client.post("/register", json=registration_body)

        assert response.status_code == 500
        data = response.json()
        assert data["error"] == "Registration failed, please try again"
        assert "connection reset" not in response.text


# =============================================================================
# POST /login Tests
# =============================================================================

class TestLogin:
    """Tests for POST /login endpoint."""

    @pytest.mark.asyncio
    async def test_login_success(
        self,
        client: AsyncClient,
        registration_body: dict,
    ):
        await client.post("/register", json=registration_body)

        response = await client.post("/login", json={
            "email": registration_body["email"],
            "password": registration_body["password"],
        })

        assert response.status_code == 200

        data = response.json()
        assert data["message"] == "Login successful"
        assert data["token"]
        assert data["user"]["name"] == registration_body["name"]
        assert data["user"]["email"] == registration_body["email"]
        assert data["user"]["id"]
        assert "password" not in data["user"]

    @pytest.mark.asyncio
    async def test_wrong_password(
        self,
        client: AsyncClient,
        registration_body: dict,
    ):
        await client.post("/register", json=registration_body)

        response = await client.post("/login", json={
            "email": registration_body["email"],
            "password": "not-the-password",
        })

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid email or password"

    @pytest.mark.asyncio
    async def test_unknown_email_same_error_as_wrong_password(
        self,
        client: AsyncClient,
    ):
        response = await client.post("/login", json={
            "email": "nobody@example.com",
            "password": "whatever",
        })

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid email or password"
        assert response.json()["code"] == "INVALID_CREDENTIALS"

    @pytest.mark.asyncio
    async def test_missing_fields(self, client: AsyncClient):
        response = await client.post("/login", json={"email": "asha@example.com"})

        assert response.status_code == 400
        assert response.json()["error"] == "All fields are required"


# =============================================================================
# GET /users Tests
# =============================================================================

class TestListUsers:
    """Tests for GET /users endpoint."""

    @pytest.mark.asyncio
    async def test_empty(self, client: AsyncClient):
        response = await client.get("/users")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.asyncio
    async def test_password_hashes_not_exposed(
        self,
        client: AsyncClient,
        registration_body: dict,
    ):
        await client.post("/register", json=registration_body)

        response = await client.get("/users")

        assert response.status_code == 200
        users = response.json()
        assert len(users) == 1
        assert set(users[0]) == {"id", "name", "email", "created_at"}
        assert "$2b$" not in response.text
