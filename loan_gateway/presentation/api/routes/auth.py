"""Registration, login and account listing endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from loan_gateway.application.dto import LoginRequest, RegisterRequest
from loan_gateway.application.services import UserService
from loan_gateway.core.dependencies import get_user_service
from loan_gateway.presentation.middleware import failure_boundary
from loan_gateway.presentation.schemas import (
    ErrorResponseSchema,
    LoginRequestSchema,
    LoginResponseSchema,
    MessageResponseSchema,
    RegisterRequestSchema,
    UserListItemSchema,
    UserSchema,
)

auth_router = APIRouter(
    responses={
        500: {"model": ErrorResponseSchema, "description": "Database unavailable"},
    },
)


@auth_router.post(
    "/register",
    response_model=MessageResponseSchema,
    summary="Register",
    description="Create an account. Emails are unique.",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Missing fields or email taken"},
    },
)
@failure_boundary("Registration failed, please try again")
async def register(
    body: RegisterRequestSchema,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> MessageResponseSchema:
    await user_service.register(
        RegisterRequest(name=body.name, email=body.email, password=body.password)
    )
    return MessageResponseSchema(message="Registration successful")


@auth_router.get(
    "/users",
    response_model=list[UserListItemSchema],
    summary="List Users",
    description="List registered accounts. Password hashes are never included.",
)
@failure_boundary("Failed to retrieve users")
async def list_users(
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> list[UserListItemSchema]:
    users = await user_service.list_users()
    return [
        UserListItemSchema(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )
        for user in users
    ]


@auth_router.post(
    "/login",
    response_model=LoginResponseSchema,
    summary="Login",
    description="Exchange email and password for a one-hour bearer token.",
    responses={
        400: {"model": ErrorResponseSchema, "description": "Missing fields or invalid credentials"},
    },
)
@failure_boundary("Login failed, please try again")
async def login(
    body: LoginRequestSchema,
    user_service: Annotated[UserService, Depends(get_user_service)],
) -> LoginResponseSchema:
    result = await user_service.login(LoginRequest(email=body.email, password=body.password))

    return LoginResponseSchema(
        message="Login successful",
        token=result.token,
        user=UserSchema(
            id=result.user.id,
            name=result.user.name,
            email=result.user.email,
        ),
    )
