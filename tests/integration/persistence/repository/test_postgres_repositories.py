"""Integration tests for the PostgreSQL repositories.

These run against a migrated database (``alembic upgrade head``) and are
skipped unless ``DATABASE__URL`` is set. Each test commits its data, so
names and slugs are made unique per run.
"""

import os
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from board.domain.repository import (
    CommentRepository,
    PostRepository,
    PostSortOrder,
    TagRepository,
)
from board.domain.value import PostId, ReactionKind, Slug, TagName
from tests.factories import make_comment, make_post
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    not os.environ.get("DATABASE__URL"),
    reason="DATABASE__URL not set; integration tests need PostgreSQL",
)

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def unique(prefix: str) -> str:
    return f"{prefix}-{uuid4().hex[:10]}"


class TestPostgresPostRepository:
    """Integration tests for PostgresPostRepository."""

    @pytest.mark.asyncio
    async def test_save_and_find_with_tags_in_order(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        tag_repo = await integration_env.get(TagRepository)
        tags = (unique("zeta"), unique("alpha"))
        await tag_repo.upsert_many([TagName(name) for name in tags])
        post = make_post(slug=unique("tagged"), tags=tags)

        # Act
        await post_repo.save(post)
        found = await post_repo.find_by_slug(post.slug)

        # Assert
        assert found is not None
        assert found.id == post.id
        assert [tag.root for tag in found.tag_names] == list(tags)
        assert await post_repo.slug_exists(post.slug)
        assert not await post_repo.slug_exists(Slug(unique("missing")))

    @pytest.mark.asyncio
    async def test_update_keeps_reaction_counters(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post(slug=unique("counted")))
        await post_repo.adjust_reaction(post.id, ReactionKind.HEART, 1)

        await post_repo.save(post.model_copy(update={"title": "Renamed title"}))
        found = await post_repo.find_by_id(post.id)

        assert found.title == "Renamed title"
        assert found.reactions.heart == 1

    @pytest.mark.asyncio
    async def test_adjust_reaction_never_goes_negative(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        post = await post_repo.save(make_post(slug=unique("floor")))

        counts = await post_repo.adjust_reaction(post.id, ReactionKind.CLAP, -1)

        assert counts is not None
        assert counts.clap == 0
        assert await post_repo.adjust_reaction(
            PostId(uuid4()), ReactionKind.CLAP, 1
        ) is None

    @pytest.mark.asyncio
    async def test_search_is_literal_and_case_insensitive(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        marker = unique("needle")
        hit = await post_repo.save(
            make_post(slug=unique("hit"), title=f"About {marker.upper()} 100%")
        )
        await post_repo.save(make_post(slug=unique("miss"), title=f"About {marker}"))

        posts = await post_repo.find_all(query=f"{marker} 100%")

        assert [p.id for p in posts] == [hit.id]
        assert await post_repo.count(query=f"{marker} 100%") == 1

    @pytest.mark.asyncio
    async def test_support_sort_within_tag(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        tag_repo = await integration_env.get(TagRepository)
        tag = unique("sorted")
        await tag_repo.upsert_many([TagName(tag)])
        base = datetime(2024, 1, 1, 12, 0, 0)
        quiet = await post_repo.save(
            make_post(slug=unique("quiet"), tags=(tag,), published_at=base)
        )
        loved = await post_repo.save(
            make_post(
                slug=unique("loved"), tags=(tag,), published_at=base - timedelta(1)
            )
        )
        await post_repo.adjust_reaction(loved.id, ReactionKind.HOPE, 1)

        by_support = await post_repo.find_all(
            sort=PostSortOrder.SUPPORT, tag=TagName(tag)
        )
        by_recent = await post_repo.find_all(tag=TagName(tag))

        assert [p.id for p in by_support] == [loved.id, quiet.id]
        assert [p.id for p in by_recent] == [quiet.id, loved.id]


class TestPostgresCommentRepository:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_thread_storage_and_cascade(self, integration_env):
        # Arrange
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        post = await post_repo.save(make_post(slug=unique("thread")))
        base = datetime(2024, 1, 1, 12, 0, 0)
        root = await comment_repo.save(make_comment(post.id, created_at=base))
        reply = await comment_repo.save(
            make_comment(
                post.id, parent_id=root.id, created_at=base + timedelta(minutes=1)
            )
        )
        other = await comment_repo.save(
            make_comment(post.id, created_at=base + timedelta(minutes=2))
        )

        # Act
        before = await comment_repo.find_by_post(post.id)
        await comment_repo.delete(root.id)
        after = await comment_repo.find_by_post(post.id)

        # Assert
        assert [c.id for c in before] == [root.id, reply.id, other.id]
        assert [c.id for c in after] == [other.id]
        assert await comment_repo.count_by_posts([post.id]) == {post.id: 1}

    @pytest.mark.asyncio
    async def test_delete_by_post(self, integration_env):
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        post = await post_repo.save(make_post(slug=unique("cleanup")))
        await comment_repo.save(make_comment(post.id))
        await comment_repo.save(make_comment(post.id))

        removed = await comment_repo.delete_by_post(post.id)

        assert removed == 2
        assert await comment_repo.count_by_post(post.id) == 0


class TestPostgresTagRepository:
    """Integration tests for PostgresTagRepository."""

    @pytest.mark.asyncio
    async def test_upsert_many_is_idempotent(self, integration_env):
        tag_repo = await integration_env.get(TagRepository)
        name = TagName(unique("again"))

        [first] = await tag_repo.upsert_many([name])
        [second] = await tag_repo.upsert_many([name])

        assert first.id == second.id
        assert name in [tag.name for tag in await tag_repo.find_all()]
