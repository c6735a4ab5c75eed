"""Moderation session use cases."""

from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.domain.service import ModerationService
from board.domain.value import Viewer


class OpenModerationSessionRequest(BaseModel):
    """Moderation login request."""

    secret: str


class OpenModerationSessionResponse(BaseModel):
    """Moderation login response.

    ``token`` goes into the moderation cookie.
    """

    token: str
    max_age: int


class OpenModerationSessionUseCase(
    BaseUseCase[OpenModerationSessionRequest, OpenModerationSessionResponse]
):
    """Use case for exchanging the moderation secret for a session token."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize open moderation session use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(
        self, request: OpenModerationSessionRequest
    ) -> OpenModerationSessionResponse:
        """Execute moderation login.

        Raises:
            ModerationDisabledError: If no secret is configured
            InvalidModerationSecretError: If the secret does not match
        """
        token = self.moderation_service.open_session(request.secret)
        return OpenModerationSessionResponse(
            token=token,
            max_age=self.moderation_service.settings.session_max_age,
        )


class GetModerationStatusRequest(BaseModel):
    """Moderation status request."""

    viewer: Viewer = Field(default_factory=Viewer)


class GetModerationStatusResponse(BaseModel):
    """Moderation status response."""

    enabled: bool
    active: bool


class GetModerationStatusUseCase(
    BaseUseCase[GetModerationStatusRequest, GetModerationStatusResponse]
):
    """Use case for checking whether the viewer holds moderation rights."""

    def __init__(self, moderation_service: ModerationService) -> None:
        """Initialize moderation status use case.

        Args:
            moderation_service: Moderation domain service
        """
        self.moderation_service = moderation_service

    async def execute(
        self, request: GetModerationStatusRequest
    ) -> GetModerationStatusResponse:
        """Report whether moderation is configured and active for the viewer."""
        return GetModerationStatusResponse(
            enabled=self.moderation_service.enabled,
            active=self.moderation_service.is_moderator(request.viewer),
        )
