"""Create comment use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import parse_comment_id
from board.domain.error import NotFoundError, ValidationError
from board.domain.service import CommentService, OwnershipService, PostService


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    slug: str  # Post slug
    content: str  # Markdown
    author_alias: str | None = None
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response.

    ``author_token`` is only returned here.
    """

    comment_id: str
    post_id: str
    parent_id: str | None
    author_token: str
    created_at: datetime


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for commenting on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        ownership_service: OwnershipService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            ownership_service: Issues the ownership token
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.ownership_service = ownership_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate the submission
        2. Verify the post exists
        3. Create the comment (the parent must belong to the same post)

        Args:
            request: Create comment request

        Returns:
            Created comment with its ownership token

        Raises:
            ValidationError: If the submission or parent is invalid
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("create_comment.execute", slug=request.slug):
            submission = self.comment_service.prepare_submission(
                content=request.content, author_alias=request.author_alias
            )

            post = await self.post_service.get_post_by_slug(request.slug)

            parent_id = None
            if request.parent_id:
                try:
                    parent_id = parse_comment_id(request.parent_id)
                except NotFoundError:
                    raise ValidationError(
                        ["The comment you are replying to could not be found."]
                    )

            token = self.ownership_service.issue_token()
            comment = await self.comment_service.create_comment(
                post_id=post.id,
                submission=submission,
                author_token=token,
                parent_id=parent_id,
            )

            return CreateCommentResponse(
                comment_id=str(comment.id),
                post_id=str(comment.post_id),
                parent_id=str(comment.parent_id) if comment.parent_id else None,
                author_token=token.root,
                created_at=comment.created_at,
            )
