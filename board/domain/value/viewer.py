"""Viewer context.

The viewer is whoever sends the current request. There are no accounts:
everything we know about them comes from the tokens their browser presents.
The interface layer builds a Viewer from cookies and passes it down
explicitly.
"""

from pydantic import Field

from board.domain.value.common import ValueObject
from board.domain.value.identifiers import CommentId, PostId
from board.domain.value.types import ReactionKind


class Viewer(ValueObject):
    """Tokens and reaction state presented by the current caller."""

    post_tokens: dict[PostId, str] = Field(default_factory=dict)
    comment_tokens: dict[CommentId, str] = Field(default_factory=dict)
    post_reactions: dict[PostId, frozenset[ReactionKind]] = Field(
        default_factory=dict
    )
    comment_reactions: dict[CommentId, frozenset[ReactionKind]] = Field(
        default_factory=dict
    )
    moderation_token: str | None = None

    def post_token(self, post_id: PostId) -> str | None:
        return self.post_tokens.get(post_id)

    def comment_token(self, comment_id: CommentId) -> str | None:
        return self.comment_tokens.get(comment_id)

    def reactions_for_post(self, post_id: PostId) -> frozenset[ReactionKind]:
        return self.post_reactions.get(post_id, frozenset())

    def reactions_for_comment(self, comment_id: CommentId) -> frozenset[ReactionKind]:
        return self.comment_reactions.get(comment_id, frozenset())


ANONYMOUS = Viewer()
