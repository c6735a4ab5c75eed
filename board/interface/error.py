"""Interface layer errors."""

from fastapi import HTTPException, status

from board.domain.error import (
    DomainError,
    InvalidModerationSecretError,
    InvalidReactionError,
    ModerationDisabledError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)


class InterfaceError(Exception):
    """Base interface error."""

    pass


class InvalidQueryError(InterfaceError):
    """Query parameter outside its allowed range."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


def to_http_exception(error: DomainError | InterfaceError) -> HTTPException:
    """Map a domain or interface error to an HTTP error response.

    Validation failures carry every message under ``detail.errors``.
    """
    if isinstance(error, ValidationError):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"errors": error.errors},
        )
    if isinstance(error, (InvalidReactionError, InvalidQueryError)):
        return HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"errors": [str(error)]},
        )
    if isinstance(error, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{error.resource} not found",
        )
    if isinstance(error, NotAuthorizedError):
        return HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail=f"Not authorized to {error.action} this {error.resource.lower()}",
        )
    if isinstance(error, ModerationDisabledError):
        return HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Moderation is not configured",
        )
    if isinstance(error, InvalidModerationSecretError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid moderation secret",
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))


def internal_error(action: str) -> HTTPException:
    """Generic 500 response that leaks no internals."""
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"Failed to {action}",
    )
