"""Get comments use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel, Field

from board.application.usecase.base import BaseUseCase
from board.application.usecase.common import ReactionSummary
from board.domain.service import (
    CommentNode,
    CommentService,
    ModerationService,
    OwnershipService,
    PostService,
    flatten_comment_tree,
    replies_to_viewer,
)
from board.domain.value import CommentSortOrder, ReactionCounts, Viewer


class CommentItem(BaseModel):
    """Comment in a thread, with its replies nested."""

    comment_id: str
    post_id: str
    parent_id: str | None
    content: str
    content_html: str
    author_alias: str | None
    reactions: ReactionSummary
    total_reaction_score: int
    was_edited: bool
    can_edit: bool
    can_moderate: bool
    replying_to_owner: bool
    depth: int
    created_at: datetime
    updated_at: datetime
    replies: list["CommentItem"] = Field(default_factory=list)

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        return cls(
            comment_id=str(node.id),
            post_id=str(node.post_id),
            parent_id=str(node.parent_id) if node.parent_id else None,
            content=node.content,
            content_html=node.content_html,
            author_alias=node.author_alias,
            reactions=ReactionSummary.build(
                ReactionCounts(
                    **{kind.value: count for kind, count in node.reaction_counts.items()}
                ),
                node.viewer_reactions,
            ),
            total_reaction_score=node.total_reaction_score,
            was_edited=node.was_edited,
            can_edit=node.can_edit,
            can_moderate=node.can_moderate,
            replying_to_owner=node.replying_to_owner,
            depth=node.depth,
            created_at=node.created_at,
            updated_at=node.updated_at,
        )


def _to_items(roots: list[CommentNode]) -> list[CommentItem]:
    """Convert a thread to response items without recursing."""
    items = [CommentItem.from_node(root) for root in roots]
    stack = list(zip(roots, items))
    while stack:
        node, item = stack.pop()
        for reply in node.replies:
            reply_item = CommentItem.from_node(reply)
            item.replies.append(reply_item)
            stack.append((reply, reply_item))
    return items


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    slug: str  # Post slug
    sort: CommentSortOrder | None = None  # Configured default when None
    viewer: Viewer = Field(default_factory=Viewer)


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    slug: str
    sort: CommentSortOrder
    comments: list[CommentItem]
    total: int
    # Replies to the viewer's own comments, in thread order
    addressed_to_viewer: list[str]


class GetCommentsUseCase(BaseUseCase[GetCommentsRequest, GetCommentsResponse]):
    """Use case for reading a post's comment thread."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        ownership_service: OwnershipService,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            ownership_service: Ownership checks
            moderation_service: Moderator checks
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.ownership_service = ownership_service
        self.moderation_service = moderation_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        The flat collection is assembled into a thread for this viewer,
        sorted, and scanned for replies addressed to the viewer.

        Args:
            request: Get comments request with the viewer's tokens

        Returns:
            Nested thread

        Raises:
            NotFoundError: If the post doesn't exist
        """
        post = await self.post_service.get_post_by_slug(request.slug)
        sort = request.sort or CommentSortOrder(
            self.comment_service.settings.default_sort
        )

        with logfire.span(
            "get_comments.execute", post_id=str(post.id), sort=sort.value
        ):
            tree = await self.comment_service.get_thread(
                post_id=post.id,
                viewer=request.viewer,
                is_owner=self.ownership_service.comment_predicate(request.viewer),
                is_moderator=self.moderation_service.is_moderator(request.viewer),
                sort=sort,
            )

            items = _to_items(tree.roots)
            addressed = [str(node.id) for node in replies_to_viewer(tree.roots)]

            return GetCommentsResponse(
                post_id=str(post.id),
                slug=str(post.slug),
                sort=sort,
                comments=items,
                total=len(flatten_comment_tree(tree.roots)),
                addressed_to_viewer=addressed,
            )
