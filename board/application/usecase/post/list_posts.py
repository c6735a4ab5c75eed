"""List posts use case."""

import logfire
from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import PostListItem
from board.domain.repository import CommentRepository, PostSortOrder
from board.domain.service import PostService
from board.domain.value import Viewer


class ListPostsRequest(BaseModel):
    """List posts request."""

    sort: PostSortOrder = PostSortOrder.RECENT
    tag: str | None = None  # Filter by tag name
    q: str | None = Field(default=None, max_length=200)  # Substring search
    limit: int = Field(default=30, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    viewer: Viewer = Field(default_factory=Viewer)


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostListItem]
    total: int
    limit: int
    offset: int


class ListPostsUseCase(BaseUseCase[ListPostsRequest, ListPostsResponse]):
    """Use case for listing posts with filtering and pagination."""

    def __init__(
        self, post_service: PostService, comment_repository: CommentRepository
    ) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
            comment_repository: Comment repository (batch comment counts)
        """
        self.post_service = post_service
        self.comment_repository = comment_repository

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        """Execute list posts flow.

        Args:
            request: List posts request with filters and pagination

        Returns:
            Page of posts matching the criteria
        """
        with logfire.span(
            "list_posts.execute",
            sort=request.sort.value,
            tag=request.tag,
            q=request.q,
            limit=request.limit,
            offset=request.offset,
        ):
            posts, total = await self.post_service.list_posts(
                sort=request.sort,
                tag=request.tag,
                query=request.q,
                limit=request.limit,
                offset=request.offset,
            )

            # Batch query to avoid one count per post
            counts = (
                await self.comment_repository.count_by_posts([post.id for post in posts])
                if posts
                else {}
            )

            items = [
                PostListItem.build(
                    post,
                    comment_count=counts.get(post.id, 0),
                    viewer_reactions=request.viewer.reactions_for_post(post.id),
                )
                for post in posts
            ]

            return ListPostsResponse(
                posts=items,
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
