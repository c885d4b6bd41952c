"""Middleware for request processing."""

from .error_handler import error_handler_middleware
from .failure_boundary import failure_boundary
from .request_context import RequestContextMiddleware
from .logging import LoggingMiddleware

__all__ = [
    "error_handler_middleware",
    "failure_boundary",
    "RequestContextMiddleware",
    "LoggingMiddleware",
]
