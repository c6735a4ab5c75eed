"""Create post use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.domain.service import OwnershipService, PostService, TagService


class CreatePostRequest(BaseModel):
    """Create post request."""

    title: str
    content: str  # Markdown
    author_alias: str | None = None
    tags: list[str] = Field(default_factory=list)


class CreatePostResponse(BaseModel):
    """Create post response.

    ``author_token`` is only ever returned here; the caller must keep it to
    edit or delete the post later.
    """

    post_id: str
    slug: str
    title: str
    tag_names: list[str]
    author_token: str
    published_at: datetime


class CreatePostUseCase(BaseUseCase[CreatePostRequest, CreatePostResponse]):
    """Use case for publishing a new post."""

    def __init__(
        self,
        post_service: PostService,
        tag_service: TagService,
        ownership_service: OwnershipService,
    ) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            tag_service: Tag domain service
            ownership_service: Issues the ownership token
        """
        self.post_service = post_service
        self.tag_service = tag_service
        self.ownership_service = ownership_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Steps:
        1. Validate the submission (all errors reported together)
        2. Create any new tags
        3. Issue an ownership token
        4. Save the post under a unique slug

        Args:
            request: Create post request

        Returns:
            Created post with its ownership token

        Raises:
            ValidationError: If the submission is invalid
        """
        with logfire.span("create_post.execute", title=request.title):
            submission = self.post_service.prepare_submission(
                title=request.title,
                content=request.content,
                author_alias=request.author_alias,
                tags=request.tags,
            )

            await self.tag_service.ensure_tags(submission.tag_names)

            token = self.ownership_service.issue_token()
            post = await self.post_service.create_post(submission, token)

            logfire.info(
                "Post created successfully", post_id=str(post.id), slug=str(post.slug)
            )

            return CreatePostResponse(
                post_id=str(post.id),
                slug=str(post.slug),
                title=post.title,
                tag_names=[tag.root for tag in post.tag_names],
                author_token=token.root,
                published_at=post.published_at,
            )
