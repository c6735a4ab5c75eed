"""Update post use case."""

from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import PostDetail
from board.domain.error import NotAuthorizedError
from board.domain.service import OwnershipService, PostService, TagService
from board.domain.value import Viewer


class UpdatePostRequest(BaseModel):
    """Update post request."""

    slug: str
    title: str
    content: str
    author_alias: str | None = None
    tags: list[str] = Field(default_factory=list)
    viewer: Viewer = Field(default_factory=Viewer)


class UpdatePostResponse(PostDetail):
    """Update post response."""


class UpdatePostUseCase(BaseUseCase[UpdatePostRequest, UpdatePostResponse]):
    """Use case for editing a post.

    Only the holder of the post's token may edit it; moderators may delete
    but not edit.
    """

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        ownership_service: OwnershipService,
    ) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            ownership_service: Ownership checks
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.ownership_service = ownership_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request with the viewer's tokens

        Returns:
            Updated post

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the viewer doesn't own the post
            ValidationError: If the submission is invalid
        """
        post = await self.post_service.get_post_by_slug(request.slug)

        if not self.ownership_service.owns_post(post, request.viewer):
            raise NotAuthorizedError("post", str(post.slug), "edit")

        submission = self.post_service.prepare_submission(
            title=request.title,
            content=request.content,
            author_alias=request.author_alias,
            tags=request.tags,
        )
        await self.tag_service.ensure_tags(submission.tag_names)
        updated = await self.post_service.update_post(post, submission)

        comment_count = await self.post_service.count_comments(updated.id)

        return UpdatePostResponse.build_detail(
            updated,
            comment_count=comment_count,
            viewer_reactions=request.viewer.reactions_for_post(updated.id),
            can_edit=True,
            can_moderate=True,
        )
