"""Base domain exception."""


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Domain exceptions represent business rule violations or
    domain-specific error conditions. The message is safe to
    return to API clients.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)


class ValidationException(DomainException):
    """Raised when required input is missing or malformed."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="VALIDATION_ERROR",
        )


class DependencyException(DomainException):
    """
    Raised when the database or another upstream dependency fails.

    The message is a fixed, client-safe sentence; the underlying
    cause is chained and only logged.
    """

    def __init__(self, message: str, code: str = "DEPENDENCY_ERROR"):
        super().__init__(message=message, code=code)
