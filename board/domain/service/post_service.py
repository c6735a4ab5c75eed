"""Post domain service."""

import re
import unicodedata
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from board.config import ContentSettings
from board.domain.error import NotFoundError, ValidationError
from board.domain.model.post import Post
from board.domain.repository import CommentRepository, PostRepository, PostSortOrder
from board.domain.value import OwnershipToken, PostId, Slug, TagName
from board.util.markdown import excerpt_from_markdown

from .base import Service

FALLBACK_SLUG = "post"
SLUG_MAX_LENGTH = 60


@dataclass(frozen=True)
class PostSubmission:
    """Post fields after trimming and validation."""

    title: str
    content: str
    author_alias: Optional[str]
    tag_names: list[TagName]


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
        content_settings: ContentSettings,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (for counts and cascades)
            content_settings: Length and count limits
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository
        self.limits = content_settings

    def prepare_submission(
        self,
        title: str,
        content: str,
        author_alias: Optional[str] = None,
        tags: Optional[list[str]] = None,
    ) -> PostSubmission:
        """Trim and validate a post submission.

        Every problem is collected before raising so the caller can show them
        all at once. Tags are lowercased and deduplicated; anything past the
        tag limit is ignored.

        Args:
            title: Raw title
            content: Raw Markdown content
            author_alias: Optional display alias
            tags: Raw tag names

        Returns:
            Normalized submission

        Raises:
            ValidationError: If any field is invalid
        """
        title = title.strip()
        content = content.strip()
        alias = (author_alias or "").strip()
        errors: list[str] = []

        if not title:
            errors.append("Title is required.")
        elif len(title) < self.limits.title_min_length:
            errors.append(
                f"Title must be at least {self.limits.title_min_length} characters."
            )
        elif len(title) > self.limits.title_max_length:
            errors.append(
                f"Title can be at most {self.limits.title_max_length} characters."
            )

        if not content:
            errors.append("Share at least one idea in the body of the post.")
        elif len(content) < self.limits.post_min_length:
            errors.append("Your post is very short, try to develop it a little more.")
        elif len(content) > self.limits.post_max_length:
            errors.append(
                f"Post can be at most {self.limits.post_max_length} characters."
            )

        if len(alias) > self.limits.alias_max_length:
            errors.append(
                f"Alias can be at most {self.limits.alias_max_length} characters."
            )

        tag_names: list[TagName] = []
        for name in self._unique_tags(tags or []):
            try:
                tag_names.append(TagName(name))
            except PydanticValidationError:
                errors.append(f"Invalid tag: {name}")

        if errors:
            logfire.info("Post submission rejected", errors=errors)
            raise ValidationError(errors)

        return PostSubmission(
            title=title,
            content=content,
            author_alias=alias or None,
            tag_names=tag_names,
        )

    def _unique_tags(self, tags: list[str]) -> list[str]:
        # Entries may themselves be comma-separated
        names: list[str] = []
        for raw in tags:
            for part in raw.split(","):
                name = part.strip().lower()
                if name and name not in names:
                    names.append(name)
        return names[: self.limits.max_tags]

    async def create_post(
        self, submission: PostSubmission, author_token: OwnershipToken
    ) -> Post:
        """Create and publish a post.

        Args:
            submission: Validated submission
            author_token: Ownership token issued for the post

        Returns:
            Saved post
        """
        post_id = PostId(uuid4())
        with logfire.span(
            "post_service.create_post", post_id=str(post_id), title=submission.title
        ):
            slug = await self.generate_unique_slug(submission.title)
            now = datetime.now()
            post = Post(
                id=post_id,
                slug=slug,
                title=submission.title,
                content=submission.content,
                excerpt=excerpt_from_markdown(
                    submission.content, self.limits.excerpt_length
                ),
                author_alias=submission.author_alias,
                author_token=author_token,
                tag_names=submission.tag_names,
                published_at=now,
                created_at=now,
                updated_at=now,
            )

            saved = await self.post_repository.save(post)
            logfire.info("Post created", post_id=str(saved.id), slug=str(saved.slug))
            return saved

    async def update_post(self, post: Post, submission: PostSubmission) -> Post:
        """Replace a post's editable fields.

        The slug stays the same so existing links keep working.

        Args:
            post: Current post
            submission: Validated submission

        Returns:
            Updated post
        """
        with logfire.span("post_service.update_post", post_id=str(post.id)):
            updated = post.model_copy(
                update={
                    "title": submission.title,
                    "content": submission.content,
                    "excerpt": excerpt_from_markdown(
                        submission.content, self.limits.excerpt_length
                    ),
                    "author_alias": submission.author_alias,
                    "tag_names": submission.tag_names,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.post_repository.save(updated)
            logfire.info("Post updated", post_id=str(saved.id))
            return saved

    async def delete_post(self, post: Post) -> None:
        """Delete a post together with its comments.

        Args:
            post: Post to delete
        """
        with logfire.span("post_service.delete_post", post_id=str(post.id)):
            removed = await self.comment_repository.delete_by_post(post.id)
            await self.post_repository.delete(post.id)
            logfire.info(
                "Post deleted", post_id=str(post.id), comments_removed=removed
            )

    async def get_post_by_slug(self, slug: str) -> Post:
        """Get a post by slug.

        Args:
            slug: Post slug as received from the caller

        Returns:
            The post

        Raises:
            NotFoundError: If no post has that slug
        """
        with logfire.span("post_service.get_post_by_slug", slug=slug):
            try:
                parsed = Slug(slug)
            except PydanticValidationError:
                logfire.warn("Malformed slug", slug=slug)
                raise NotFoundError("Post", slug)

            post = await self.post_repository.find_by_slug(parsed)
            if not post:
                logfire.warn("Post not found by slug", slug=slug)
                raise NotFoundError("Post", slug)

            logfire.info("Post found by slug", slug=slug, post_id=str(post.id))
            return post

    async def get_post_by_id(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Raises:
            NotFoundError: If the post doesn't exist
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def list_posts(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        tag: Optional[str] = None,
        query: Optional[str] = None,
        limit: int = 30,
        offset: int = 0,
    ) -> tuple[list[Post], int]:
        """List posts with filters and pagination.

        Args:
            sort: Sort order
            tag: Only posts carrying this tag
            query: Case-insensitive substring filter
            limit: Page size
            offset: Number of posts to skip

        Returns:
            The page of posts and the total number of matches
        """
        with logfire.span(
            "post_service.list_posts",
            sort=sort.value,
            tag=tag,
            query=query,
            limit=limit,
            offset=offset,
        ):
            tag_name: Optional[TagName] = None
            if tag:
                try:
                    tag_name = TagName(tag.strip().lower())
                except PydanticValidationError:
                    logfire.info("Unknown tag filter", tag=tag)
                    return [], 0

            query = query.strip() if query else None

            posts = await self.post_repository.find_all(
                sort=sort,
                tag=tag_name,
                query=query or None,
                limit=limit,
                offset=offset,
            )
            total = await self.post_repository.count(tag=tag_name, query=query or None)
            logfire.info("Posts listed", count=len(posts), total=total)
            return posts, total

    async def count_comments(self, post_id: PostId) -> int:
        """Number of comments on a post."""
        return await self.comment_repository.count_by_post(post_id)

    async def generate_unique_slug(self, title: str) -> Slug:
        """Generate a unique slug from a title.

        Collisions get a numeric suffix starting at ``-2``.

        Args:
            title: Post title to slugify

        Returns:
            Unused slug
        """
        with logfire.span("post_service.generate_unique_slug", title=title):
            base_slug = self.slugify(title)

            candidate = base_slug
            suffix = 1
            while await self.post_repository.slug_exists(Slug(candidate)):
                suffix += 1
                candidate = f"{base_slug}-{suffix}"
                logfire.debug(
                    "Slug collision, trying with suffix",
                    base_slug=base_slug,
                    attempt=candidate,
                )

            logfire.info(
                "Generated unique slug", slug=candidate, had_collision=suffix > 1
            )
            return Slug(candidate)

    @staticmethod
    def slugify(title: str) -> str:
        """Convert a title to a URL-safe slug.

        - Strips accents and lowercases
        - Collapses runs of other characters into single hyphens
        - Truncates to 60 characters
        - Falls back to ``post`` when nothing usable remains

        Args:
            title: Title to slugify

        Returns:
            URL-safe slug string, never empty
        """
        normalized = unicodedata.normalize("NFD", title.lower())
        normalized = "".join(
            char for char in normalized if not unicodedata.combining(char)
        )
        slug = re.sub(r"[^a-z0-9]+", "-", normalized).strip("-")
        # Truncation can expose a trailing hyphen
        slug = slug[:SLUG_MAX_LENGTH].strip("-")
        return slug or FALLBACK_SLUG
