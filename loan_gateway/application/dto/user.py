"""Data transfer objects for registration and login."""

from dataclasses import dataclass
from typing import List, Optional

from loan_gateway.domain.entities import User
from .common import missing_fields


@dataclass(frozen=True)
class RegisterRequest:
    """Input data for creating an account."""

    name: Optional[str]
    email: Optional[str]
    password: Optional[str]

    def validate(self) -> List[str]:
        return missing_fields(
            [("name", self.name), ("email", self.email), ("password", self.password)]
        )


@dataclass(frozen=True)
class LoginRequest:
    """Input data for exchanging credentials for a token."""

    email: Optional[str]
    password: Optional[str]

    def validate(self) -> List[str]:
        return missing_fields([("email", self.email), ("password", self.password)])


@dataclass(frozen=True)
class UserSummary:
    """Public view of a user, without the password hash."""

    id: str
    name: str
    email: str
    created_at: str

    @classmethod
    def from_entity(cls, user: User) -> "UserSummary":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at.isoformat(),
        )


@dataclass(frozen=True)
class LoginResult:
    """A signed token together with the user it was issued for."""

    token: str
    user: UserSummary
