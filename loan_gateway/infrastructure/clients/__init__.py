"""External API client implementations."""

from .gemini_client import HttpGeminiClient

__all__ = [
    "HttpGeminiClient",
]
