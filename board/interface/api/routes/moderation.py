"""Moderation session routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from board.application.usecase.moderation import (
    GetModerationStatusRequest,
    GetModerationStatusResponse,
    GetModerationStatusUseCase,
    OpenModerationSessionRequest,
    OpenModerationSessionUseCase,
)
from board.config import Settings
from board.domain.error import DomainError
from board.domain.value import Viewer
from board.interface.api.cookies import CookieJar, get_viewer
from board.interface.error import to_http_exception

router = APIRouter(
    prefix="/moderation", tags=["moderation"], route_class=DishkaRoute
)


class ModerationLoginAPIRequest(BaseModel):
    """API request for opening a moderation session."""

    secret: str = ""


@router.get("/session", response_model=GetModerationStatusResponse)
async def moderation_status(
    use_case: FromDishka[GetModerationStatusUseCase],
    viewer: Viewer = Depends(get_viewer),
) -> GetModerationStatusResponse:
    """Report whether moderation is configured and whether the caller holds it."""
    return await use_case.execute(GetModerationStatusRequest(viewer=viewer))


@router.post("/session", response_model=GetModerationStatusResponse)
async def open_session(
    request: ModerationLoginAPIRequest,
    response: Response,
    use_case: FromDishka[OpenModerationSessionUseCase],
    settings: FromDishka[Settings],
) -> GetModerationStatusResponse:
    """Exchange the moderation secret for a session cookie.

    Args:
        request: Moderation secret
        response: Outgoing response (for cookies)
        use_case: Open moderation session use case from DI
        settings: Application settings

    Returns:
        Moderation status after login
    """
    try:
        result = await use_case.execute(
            OpenModerationSessionRequest(secret=request.secret)
        )
    except DomainError as e:
        logfire.warn("Moderation login rejected", error=str(e))
        raise to_http_exception(e)

    CookieJar(response, settings).set_moderation_token(result.token, result.max_age)
    logfire.info("Moderation session opened")
    return GetModerationStatusResponse(enabled=True, active=True)


@router.delete("/session", status_code=status.HTTP_204_NO_CONTENT)
async def close_session(settings: FromDishka[Settings]) -> Response:
    """Clear the moderation cookie."""
    response = Response(status_code=status.HTTP_204_NO_CONTENT)
    CookieJar(response, settings).clear_moderation_token()
    return response
