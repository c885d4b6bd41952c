"""Per-endpoint failure boundary."""

import functools
from typing import Any, Awaitable, Callable, TypeVar

import structlog

from loan_gateway.domain.exceptions import DependencyException, DomainException

logger = structlog.get_logger(__name__)

F = TypeVar("F", bound=Callable[..., Awaitable[Any]])


def failure_boundary(message: str) -> Callable[[F], F]:
    """
    Turn unexpected faults in an endpoint into a DependencyException.

    Business errors (DomainException) pass through untouched. Upstream
    failures and anything unexpected are logged with their cause and
    replaced by a DependencyException carrying ``message``, so the client
    only ever sees the endpoint's fixed failure sentence.

    Args:
        message: Client-facing message for the 500 response
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except DependencyException as exc:
                logger.error(
                    "endpoint_dependency_failed",
                    endpoint=func.__name__,
                    code=exc.code,
                    error=exc.message,
                )
                raise DependencyException(message, code=exc.code) from exc
            except DomainException:
                raise
            except Exception as exc:
                logger.exception(
                    "endpoint_failed",
                    endpoint=func.__name__,
                    error_type=type(exc).__name__,
                )
                raise DependencyException(message) from exc

        return wrapper  # type: ignore[return-value]

    return decorator
