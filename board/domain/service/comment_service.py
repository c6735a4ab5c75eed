"""Comment domain service."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional
from uuid import uuid4

import logfire

from board.config import CommentSettings, ContentSettings
from board.domain.error import NotFoundError, ValidationError
from board.domain.model.comment import Comment
from board.domain.repository import CommentRepository
from board.domain.value import (
    CommentId,
    CommentSortOrder,
    OwnershipToken,
    PostId,
    Viewer,
)

from .base import Service
from .comment_tree import CommentTree, build_comment_tree, sort_comment_tree


@dataclass(frozen=True)
class CommentSubmission:
    """Comment fields after trimming and validation."""

    content: str
    author_alias: Optional[str]


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        content_settings: ContentSettings,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            content_settings: Length limits
            comment_settings: Thread rendering settings
        """
        self.comment_repository = comment_repository
        self.limits = content_settings
        self.settings = comment_settings

    def prepare_submission(
        self, content: str, author_alias: Optional[str] = None
    ) -> CommentSubmission:
        """Trim and validate a comment submission.

        Raises:
            ValidationError: With every problem found
        """
        content = content.strip()
        alias = (author_alias or "").strip()
        errors: list[str] = []

        if not content:
            errors.append("Write your reply before publishing it.")
        elif len(content) < self.limits.comment_min_length:
            errors.append("Your reply is very short, try to develop it a little more.")
        elif len(content) > self.limits.comment_max_length:
            errors.append(
                f"Reply can be at most {self.limits.comment_max_length} characters."
            )

        if len(alias) > self.limits.alias_max_length:
            errors.append(
                f"Alias can be at most {self.limits.alias_max_length} characters."
            )

        if errors:
            logfire.info("Comment submission rejected", errors=errors)
            raise ValidationError(errors)

        return CommentSubmission(content=content, author_alias=alias or None)

    async def create_comment(
        self,
        post_id: PostId,
        submission: CommentSubmission,
        author_token: OwnershipToken,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a comment on a post or reply to another comment.

        Args:
            post_id: Post ID
            submission: Validated submission
            author_token: Ownership token issued for the comment
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If the parent is missing or on another post
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.post_id != post_id:
                    logfire.error(
                        "Parent comment not found on post",
                        parent_id=str(parent_id),
                        post_id=str(post_id),
                        parent_post_id=str(parent.post_id) if parent else None,
                    )
                    raise ValidationError(
                        ["The comment you are replying to could not be found."]
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                parent_id=parent_id,
                content=submission.content,
                author_alias=submission.author_alias,
                author_token=author_token,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))
            return comment

    async def update_comment(
        self, comment: Comment, submission: CommentSubmission
    ) -> Comment:
        """Replace a comment's content and alias.

        Args:
            comment: Current comment
            submission: Validated submission

        Returns:
            Updated comment
        """
        with logfire.span(
            "comment_service.update_comment", comment_id=str(comment.id)
        ):
            updated = comment.model_copy(
                update={
                    "content": submission.content,
                    "author_alias": submission.author_alias,
                    "updated_at": datetime.now(),
                }
            )
            saved = await self.comment_repository.save(updated)
            logfire.info(
                "Comment updated",
                comment_id=str(saved.id),
                content_length=len(saved.content),
            )
            return saved

    async def delete_comment(self, comment: Comment) -> None:
        """Delete a comment; storage removes its replies too."""
        with logfire.span(
            "comment_service.delete_comment", comment_id=str(comment.id)
        ):
            await self.comment_repository.delete(comment.id)
            logfire.info(
                "Comment deleted",
                comment_id=str(comment.id),
                post_id=str(comment.post_id),
            )

    async def get_comments_for_post(self, post_id: PostId) -> list[Comment]:
        """Get the flat comment collection of a post."""
        with logfire.span(
            "comment_service.get_comments_for_post", post_id=str(post_id)
        ):
            comments = await self.comment_repository.find_by_post(post_id)
            logfire.info(
                "Comments retrieved for post", post_id=str(post_id), count=len(comments)
            )
            return comments

    async def get_thread(
        self,
        post_id: PostId,
        viewer: Viewer,
        is_owner: Callable[[Comment], bool],
        is_moderator: bool = False,
        sort: CommentSortOrder | None = None,
    ) -> CommentTree:
        """Load a post's comments and assemble them into a sorted thread.

        Args:
            post_id: Post ID
            viewer: Current viewer (for reaction state)
            is_owner: Ownership check bound to the viewer
            is_moderator: Whether the viewer holds moderation rights
            sort: Sort order (configured default when None)

        Returns:
            Sorted thread and the ids left out of it
        """
        sort = sort or CommentSortOrder(self.settings.default_sort)
        comments = await self.get_comments_for_post(post_id)

        with logfire.span(
            "comment_service.get_thread",
            post_id=str(post_id),
            sort=sort.value,
            count=len(comments),
        ):
            tree = build_comment_tree(
                comments,
                is_owner,
                edited_threshold=timedelta(
                    seconds=self.settings.edited_threshold_seconds
                ),
                max_depth=self.settings.max_depth,
                is_moderator=is_moderator,
                viewer_reactions=viewer.comment_reactions,
            )
            return CommentTree(
                roots=sort_comment_tree(tree.roots, sort), dropped=tree.dropped
            )
