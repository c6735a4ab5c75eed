"""Liveness and readiness probes."""

from datetime import datetime

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError

from board.config import Settings
from board.domain.repository import PostRepository
from board.util.observability import SERVICE_VERSION

router = APIRouter(prefix="/health", tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Process status; never touches the database."""

    status: str
    timestamp: datetime
    version: str
    environment: str
    moderation_enabled: bool


class ReadinessResponse(BaseModel):
    """Storage round trip result."""

    status: str
    posts: int | None = None


@router.get("", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(),
        version=SERVICE_VERSION,
        environment=settings.environment,
        moderation_enabled=settings.moderation.enabled,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
async def readiness_check(post_repository: FromDishka[PostRepository]):
    """Report 503 while the database cannot answer a count query."""
    try:
        posts = await post_repository.count()
    except SQLAlchemyError as e:
        logfire.warning("Readiness check failed", error=str(e))
        unavailable = ReadinessResponse(status="unavailable")
        return JSONResponse(status_code=503, content=unavailable.model_dump())
    return ReadinessResponse(status="ready", posts=posts)
