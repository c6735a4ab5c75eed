"""Delete comment use case."""

import logfire
from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import parse_comment_id
from board.domain.error import NotAuthorizedError
from board.domain.service import CommentService, ModerationService, OwnershipService
from board.domain.value import Viewer


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    viewer: Viewer = Field(default_factory=Viewer)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    comment_id: str
    post_id: str
    by_moderator: bool


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]):
    """Use case for deleting a comment (replies go with it)."""

    def __init__(
        self,
        comment_service: CommentService,
        ownership_service: OwnershipService,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            ownership_service: Ownership checks
            moderation_service: Moderator checks
        """
        self.comment_service = comment_service
        self.ownership_service = ownership_service
        self.moderation_service = moderation_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the viewer is neither owner nor moderator
        """
        comment_id = parse_comment_id(request.comment_id)
        comment = await self.comment_service.get_comment_by_id(comment_id)

        is_owner = self.ownership_service.owns_comment(comment, request.viewer)
        is_moderator = self.moderation_service.is_moderator(request.viewer)
        if not is_owner and not is_moderator:
            raise NotAuthorizedError("comment", request.comment_id, "delete")

        await self.comment_service.delete_comment(comment)

        if not is_owner:
            logfire.info("Comment removed by moderator", comment_id=str(comment.id))

        return DeleteCommentResponse(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            by_moderator=not is_owner,
        )
