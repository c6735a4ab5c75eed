"""Update comment use case."""

from datetime import datetime, timedelta

from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import parse_comment_id
from board.domain.error import NotAuthorizedError
from board.domain.service import CommentService, OwnershipService
from board.domain.value import Viewer
from board.util.markdown import render_markdown


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str
    content: str
    author_alias: str | None = None
    viewer: Viewer = Field(default_factory=Viewer)


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    comment_id: str
    post_id: str
    content: str
    content_html: str
    author_alias: str | None
    was_edited: bool
    created_at: datetime
    updated_at: datetime


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, UpdateCommentResponse]):
    """Use case for editing a comment's content and alias."""

    def __init__(
        self, comment_service: CommentService, ownership_service: OwnershipService
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            ownership_service: Ownership checks
        """
        self.comment_service = comment_service
        self.ownership_service = ownership_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with the viewer's tokens

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the viewer doesn't own the comment
            ValidationError: If the submission is invalid
        """
        comment_id = parse_comment_id(request.comment_id)
        comment = await self.comment_service.get_comment_by_id(comment_id)

        if not self.ownership_service.owns_comment(comment, request.viewer):
            raise NotAuthorizedError("comment", request.comment_id, "edit")

        submission = self.comment_service.prepare_submission(
            content=request.content, author_alias=request.author_alias
        )
        updated = await self.comment_service.update_comment(comment, submission)

        threshold = timedelta(
            seconds=self.comment_service.settings.edited_threshold_seconds
        )

        return UpdateCommentResponse(
            comment_id=str(updated.id),
            post_id=str(updated.post_id),
            content=updated.content,
            content_html=render_markdown(updated.content),
            author_alias=updated.author_alias,
            was_edited=updated.updated_at - updated.created_at > threshold,
            created_at=updated.created_at,
            updated_at=updated.updated_at,
        )
