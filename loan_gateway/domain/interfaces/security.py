"""Credential and token interfaces."""

from abc import ABC, abstractmethod
from typing import Optional

from loan_gateway.domain.entities import Identity


class PasswordHasher(ABC):
    """One-way password hashing."""

    @abstractmethod
    async def hash(self, password: str) -> str:
        """Return a salted one-way hash of the password."""
        ...

    @abstractmethod
    async def verify(self, password: str, password_hash: Optional[str]) -> bool:
        """
        Check a candidate password against a stored hash.

        With no stored hash the check still costs as much as a real one
        and returns False.
        """
        ...


class TokenService(ABC):
    """Issues and verifies signed, time-limited identity tokens."""

    @abstractmethod
    def issue(self, user_id: str, email: str) -> str:
        """Sign a token for the given identity."""
        ...

    @abstractmethod
    def verify(self, token: str) -> Identity:
        """
        Decode a token.

        Raises:
            InvalidTokenException: If the token is malformed, forged or expired
        """
        ...
