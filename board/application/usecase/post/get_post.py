"""Get post use case."""

from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import PostDetail
from board.domain.service import ModerationService, OwnershipService, PostService
from board.domain.value import Viewer


class GetPostRequest(BaseModel):
    """Get post request."""

    slug: str
    viewer: Viewer = Field(default_factory=Viewer)


class GetPostResponse(PostDetail):
    """Get post response."""


class GetPostUseCase(BaseUseCase[GetPostRequest, GetPostResponse]):
    """Use case for reading a single post."""

    def __init__(
        self,
        post_service: PostService,
        ownership_service: OwnershipService,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
            ownership_service: Ownership checks
            moderation_service: Moderator checks
        """
        self.post_service = post_service
        self.ownership_service = ownership_service
        self.moderation_service = moderation_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_post_by_slug(request.slug)
        comment_count = await self.post_service.count_comments(post.id)

        can_edit = self.ownership_service.owns_post(post, request.viewer)
        can_moderate = can_edit or self.moderation_service.is_moderator(request.viewer)

        return GetPostResponse.build_detail(
            post,
            comment_count=comment_count,
            viewer_reactions=request.viewer.reactions_for_post(post.id),
            can_edit=can_edit,
            can_moderate=can_moderate,
        )
