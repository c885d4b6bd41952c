"""User and credential-related domain exceptions."""

from .base import DomainException


class DuplicateEmailException(DomainException):
    """Raised when registering an email that already exists."""

    def __init__(self, email: str):
        super().__init__(
            message="Email already registered",
            code="EMAIL_ALREADY_REGISTERED",
        )
        self.email = email


class InvalidCredentialsException(DomainException):
    """
    Raised when a login fails.

    Unknown email and wrong password share the same message so
    the response does not reveal whether an account exists.
    """

    def __init__(self):
        super().__init__(
            message="Invalid email or password",
            code="INVALID_CREDENTIALS",
        )
