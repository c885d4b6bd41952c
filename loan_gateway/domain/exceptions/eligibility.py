"""Generative model exceptions."""

from .base import DependencyException


class EligibilityModelException(DependencyException):
    """Raised when the generative model call fails or returns no text."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(
            message=message,
            code="AI_MODEL_ERROR",
        )
        self.status_code = status_code
