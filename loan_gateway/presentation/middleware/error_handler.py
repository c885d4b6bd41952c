"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
import structlog

from loan_gateway.domain.exceptions import (
    DomainException,
    DependencyException,
    InvalidTokenException,
    LoanNotFoundException,
    MissingTokenException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)


def _error_response(status_code: int, message: str, code: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": message,
            "code": code,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    @app.exception_handler(MissingTokenException)
    async def missing_token_handler(
        request: Request,
        exc: MissingTokenException,
    ) -> JSONResponse:
        """Handle requests to protected routes without a token."""
        return _error_response(401, exc.message, exc.code)

    @app.exception_handler(InvalidTokenException)
    async def invalid_token_handler(
        request: Request,
        exc: InvalidTokenException,
    ) -> JSONResponse:
        """Handle forged, malformed or expired tokens."""
        logger.info("token_rejected", reason=exc.reason, path=request.url.path)
        return _error_response(403, exc.message, exc.code)

    @app.exception_handler(LoanNotFoundException)
    async def loan_not_found_handler(
        request: Request,
        exc: LoanNotFoundException,
    ) -> JSONResponse:
        """Handle loan not found errors."""
        return _error_response(404, exc.message, exc.code)

    @app.exception_handler(DependencyException)
    async def dependency_error_handler(
        request: Request,
        exc: DependencyException,
    ) -> JSONResponse:
        """Handle database and generative model failures."""
        logger.error(
            "dependency_error",
            code=exc.code,
            message=exc.message,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
        )
        return _error_response(500, exc.message, exc.code)

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Report unparseable bodies as plain 400 validation errors."""
        logger.info("request_validation_failed", errors=len(exc.errors()))
        return _error_response(400, "Invalid request body", "VALIDATION_ERROR")

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle validation, conflict and other client errors."""
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc.message, exc.code)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return _error_response(500, "An unexpected error occurred.", "INTERNAL_ERROR")
