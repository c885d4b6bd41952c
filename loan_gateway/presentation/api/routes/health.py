"""Liveness and database reachability check."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, Response
from pydantic import BaseModel, Field
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from loan_gateway import __version__
from loan_gateway.core.config import Settings, get_settings
from loan_gateway.infrastructure.database import get_db_session

logger = structlog.get_logger(__name__)

health_router = APIRouter()


class HealthResponse(BaseModel):
    status: str = Field(..., examples=["healthy"])
    service: str = Field(..., examples=["loan-gateway"])
    version: str
    database: str = Field(..., description="'ok' or 'unreachable'")


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Reports whether the service can reach its database.",
    responses={503: {"model": HealthResponse, "description": "Database unreachable"}},
)
async def health_check(
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> HealthResponse:
    try:
        await session.execute(text("SELECT 1"))
        database = "ok"
    except (SQLAlchemyError, OSError) as exc:
        logger.warning("health_database_unreachable", error=str(exc))
        database = "unreachable"

    if database != "ok":
        response.status_code = 503

    return HealthResponse(
        status="healthy" if database == "ok" else "degraded",
        service=settings.app_name,
        version=__version__,
        database=database,
    )
