"""Account-related Pydantic schemas."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequestSchema(BaseModel):
    """Schema for POST /register request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "name": "Asha Rao",
                    "email": "asha@example.com",
                    "password": "s3cret-pass",
                }
            ]
        }
    )

    # Presence is checked by the service so a missing field is a 400
    name: Optional[str] = Field(None, description="Display name")
    email: Optional[str] = Field(None, description="Login email, unique per account")
    password: Optional[str] = Field(None, description="Plaintext password")


class LoginRequestSchema(BaseModel):
    """Schema for POST /login request body."""

    email: Optional[str] = Field(None, examples=["asha@example.com"])
    password: Optional[str] = Field(None, examples=["s3cret-pass"])


class MessageResponseSchema(BaseModel):
    message: str = Field(..., examples=["Registration successful"])


class UserSchema(BaseModel):
    """Public user fields."""

    id: str = Field(..., description="User identifier")
    name: str
    email: str


class UserListItemSchema(UserSchema):
    """Schema for an entry of GET /users."""

    created_at: str = Field(..., description="ISO 8601 timestamp of registration")


class LoginResponseSchema(BaseModel):
    """Schema for POST /login response body."""

    message: str = Field(..., examples=["Login successful"])
    token: str = Field(..., description="Bearer token, valid for one hour")
    user: UserSchema
