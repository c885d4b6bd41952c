"""Bearer token authentication exceptions."""

from .base import DomainException


class MissingTokenException(DomainException):
    """Raised when a protected route is called without a bearer token."""

    def __init__(self):
        super().__init__(
            message="Access Denied",
            code="ACCESS_DENIED",
        )


class InvalidTokenException(DomainException):
    """Raised when a bearer token is malformed, forged or expired."""

    def __init__(self, reason: str = "invalid"):
        super().__init__(
            message="Invalid Token",
            code="INVALID_TOKEN",
        )
        self.reason = reason
