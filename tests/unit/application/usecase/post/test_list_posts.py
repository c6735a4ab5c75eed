"""Unit tests for ListPostsUseCase."""

from datetime import datetime, timedelta

import pytest
from pydantic import ValidationError as PydanticValidationError

from board.application.usecase.post import ListPostsRequest, ListPostsUseCase
from board.domain.repository import CommentRepository, PostRepository, PostSortOrder
from board.domain.value import ReactionCounts, ReactionKind, Viewer
from tests.factories import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPostsUseCase:
    """Tests for ListPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_with_comment_counts(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        base = datetime(2024, 1, 1, 12, 0, 0)
        older = await post_repo.save(make_post(published_at=base))
        newer = await post_repo.save(make_post(published_at=base + timedelta(days=1)))
        for _ in range(3):
            await comment_repo.save(make_comment(older.id))

        # Act
        response = await use_case.execute(ListPostsRequest())

        # Assert
        assert [item.post_id for item in response.posts] == [
            str(newer.id),
            str(older.id),
        ]
        assert [item.comment_count for item in response.posts] == [0, 3]
        assert response.total == 2
        assert response.limit == 30
        assert response.offset == 0

    @pytest.mark.asyncio
    async def test_pagination_and_support_sort(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        for hearts in (1, 5, 3):
            await post_repo.save(make_post(reactions=ReactionCounts(heart=hearts)))

        response = await use_case.execute(
            ListPostsRequest(sort=PostSortOrder.SUPPORT, limit=2, offset=1)
        )

        assert [item.reactions.total for item in response.posts] == [3, 1]
        assert response.total == 3

    @pytest.mark.asyncio
    async def test_viewer_reactions_per_post(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post(reactions=ReactionCounts(hope=1)))
        viewer = Viewer(post_reactions={post.id: frozenset({ReactionKind.HOPE})})

        response = await use_case.execute(ListPostsRequest(viewer=viewer))

        assert response.posts[0].reactions.viewer_reactions == [ReactionKind.HOPE]

    @pytest.mark.asyncio
    async def test_empty_board(self, unit_env):
        use_case = await unit_env.get(ListPostsUseCase)

        response = await use_case.execute(ListPostsRequest(tag="work"))

        assert response.posts == []
        assert response.total == 0

    @pytest.mark.parametrize(
        "kwargs", [{"limit": 0}, {"limit": 101}, {"offset": -1}, {"q": "x" * 201}]
    )
    def test_request_bounds(self, kwargs):
        with pytest.raises(PydanticValidationError):
            ListPostsRequest(**kwargs)
