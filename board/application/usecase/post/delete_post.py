"""Delete post use case."""

import logfire
from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.domain.error import NotAuthorizedError
from board.domain.service import ModerationService, OwnershipService, PostService
from board.domain.value import Viewer


class DeletePostRequest(BaseModel):
    """Delete post request."""

    slug: str
    viewer: Viewer = Field(default_factory=Viewer)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    slug: str
    by_moderator: bool


class DeletePostUseCase(BaseUseCase[DeletePostRequest, DeletePostResponse]):
    """Use case for deleting a post and its comments."""

    def __init__(
        self,
        post_service: PostService,
        ownership_service: OwnershipService,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
            ownership_service: Ownership checks
            moderation_service: Moderator checks
        """
        self.post_service = post_service
        self.ownership_service = ownership_service
        self.moderation_service = moderation_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the viewer is neither owner nor moderator
        """
        post = await self.post_service.get_post_by_slug(request.slug)

        is_owner = self.ownership_service.owns_post(post, request.viewer)
        is_moderator = self.moderation_service.is_moderator(request.viewer)
        if not is_owner and not is_moderator:
            raise NotAuthorizedError("post", str(post.slug), "delete")

        await self.post_service.delete_post(post)

        if not is_owner:
            logfire.info("Post removed by moderator", post_id=str(post.id))

        return DeletePostResponse(
            post_id=str(post.id),
            slug=str(post.slug),
            by_moderator=not is_owner,
        )
