"""Moderation use cases."""

from .moderation_session import (
    GetModerationStatusRequest,
    GetModerationStatusResponse,
    GetModerationStatusUseCase,
    OpenModerationSessionRequest,
    OpenModerationSessionResponse,
    OpenModerationSessionUseCase,
)

__all__ = [
    "GetModerationStatusRequest",
    "GetModerationStatusResponse",
    "GetModerationStatusUseCase",
    "OpenModerationSessionRequest",
    "OpenModerationSessionResponse",
    "OpenModerationSessionUseCase",
]
