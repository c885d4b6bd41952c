"""Password hashing and token signing."""

from .passwords import BcryptPasswordHasher
from .tokens import JwtTokenService

__all__ = [
    "BcryptPasswordHasher",
    "JwtTokenService",
]
