"""Unit tests for ReactionService."""

from uuid import uuid4

import pytest

from board.domain.error import InvalidReactionError, NotFoundError
from board.domain.repository import CommentRepository, PostRepository
from board.domain.service import ReactionService
from board.domain.value import CommentId, PostId, ReactionCounts, ReactionKind
from tests.factories import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestParseKind:
    """Tests for parse_kind."""

    def test_known_kind(self):
        assert ReactionService.parse_kind("heart") is ReactionKind.HEART

    @pytest.mark.parametrize("value", ["", "HEART", "thumbsup", "angry"])
    def test_unknown_kind(self, value):
        with pytest.raises(InvalidReactionError):
            ReactionService.parse_kind(value)


class TestTogglePostReaction:
    """Tests for toggle_post_reaction."""

    @pytest.mark.asyncio
    async def test_adds_reaction(self, unit_env):
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        toggle = await reaction_service.toggle_post_reaction(
            post.id, ReactionKind.HEART, frozenset()
        )

        # Assert
        assert toggle.added
        assert toggle.counts.heart == 1
        assert toggle.viewer_reactions == frozenset({ReactionKind.HEART})
        stored = await post_repo.find_by_id(post.id)
        assert stored.reactions.heart == 1

    @pytest.mark.asyncio
    async def test_removes_reaction_already_applied(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(
            make_post(reactions=ReactionCounts(heart=2, clap=1))
        )

        toggle = await reaction_service.toggle_post_reaction(
            post.id,
            ReactionKind.HEART,
            frozenset({ReactionKind.HEART, ReactionKind.CLAP}),
        )

        assert not toggle.added
        assert toggle.counts == ReactionCounts(heart=1, clap=1)
        assert toggle.viewer_reactions == frozenset({ReactionKind.CLAP})

    @pytest.mark.asyncio
    async def test_removal_never_goes_below_zero(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        toggle = await reaction_service.toggle_post_reaction(
            post.id, ReactionKind.HOPE, frozenset({ReactionKind.HOPE})
        )

        assert not toggle.added
        assert toggle.counts.hope == 0
        assert toggle.viewer_reactions == frozenset()

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)

        with pytest.raises(NotFoundError):
            await reaction_service.toggle_post_reaction(
                PostId(uuid4()), ReactionKind.HEART, frozenset()
            )


class TestToggleCommentReaction:
    """Tests for toggle_comment_reaction."""

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_counts(self, unit_env):
        # Arrange
        reaction_service = await unit_env.get(ReactionService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.save(make_comment(make_post().id))

        # Act
        first = await reaction_service.toggle_comment_reaction(
            comment.id, ReactionKind.CLAP, frozenset()
        )
        second = await reaction_service.toggle_comment_reaction(
            comment.id, ReactionKind.CLAP, first.viewer_reactions
        )

        # Assert
        assert first.added and first.counts.clap == 1
        assert not second.added and second.counts.clap == 0
        assert second.viewer_reactions == frozenset()

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        reaction_service = await unit_env.get(ReactionService)

        with pytest.raises(NotFoundError):
            await reaction_service.toggle_comment_reaction(
                CommentId(uuid4()), ReactionKind.HEART, frozenset()
            )
