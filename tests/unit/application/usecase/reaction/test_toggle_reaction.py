"""Unit tests for the toggle reaction use cases."""

import pytest

from board.application.usecase.reaction import (
    ToggleCommentReactionRequest,
    ToggleCommentReactionUseCase,
    TogglePostReactionRequest,
    TogglePostReactionUseCase,
)
from board.domain.error import InvalidReactionError, NotFoundError
from board.domain.repository import CommentRepository, PostRepository
from board.domain.value import ReactionCounts, ReactionKind, Viewer
from tests.factories import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestTogglePostReactionUseCase:
    """Tests for TogglePostReactionUseCase."""

    @pytest.mark.asyncio
    async def test_add_then_remove(self, unit_env):
        # Arrange
        use_case = await unit_env.get(TogglePostReactionUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(
            make_post(slug="react", reactions=ReactionCounts(clap=2))
        )

        # Act
        added = await use_case.execute(
            TogglePostReactionRequest(slug="react", kind="heart")
        )
        viewer = Viewer(
            post_reactions={post.id: frozenset(added.reactions.viewer_reactions)}
        )
        removed = await use_case.execute(
            TogglePostReactionRequest(slug="react", kind="heart", viewer=viewer)
        )

        # Assert
        assert added.added
        assert added.target_id == str(post.id)
        assert added.reactions.counts[ReactionKind.HEART] == 1
        assert added.reactions.total == 3
        assert added.reactions.viewer_reactions == [ReactionKind.HEART]
        assert not removed.added
        assert removed.reactions.counts[ReactionKind.HEART] == 0
        assert removed.reactions.viewer_reactions == []

    @pytest.mark.asyncio
    async def test_unknown_kind(self, unit_env):
        use_case = await unit_env.get(TogglePostReactionUseCase)
        post_repo = await unit_env.get(PostRepository)
        await post_repo.save(make_post(slug="react"))

        with pytest.raises(InvalidReactionError):
            await use_case.execute(
                TogglePostReactionRequest(slug="react", kind="angry")
            )

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(TogglePostReactionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(TogglePostReactionRequest(slug="gone", kind="hope"))


class TestToggleCommentReactionUseCase:
    """Tests for ToggleCommentReactionUseCase."""

    @pytest.mark.asyncio
    async def test_add(self, unit_env):
        use_case = await unit_env.get(ToggleCommentReactionUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(make_post().id))

        response = await use_case.execute(
            ToggleCommentReactionRequest(comment_id=str(comment.id), kind="thumbs_up")
        )

        assert response.added
        assert response.reactions.counts[ReactionKind.THUMBS_UP] == 1

    @pytest.mark.asyncio
    async def test_malformed_comment_id(self, unit_env):
        use_case = await unit_env.get(ToggleCommentReactionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleCommentReactionRequest(comment_id="abc", kind="heart")
            )
