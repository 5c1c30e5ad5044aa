"""Integration tests for the SQL repositories against SQLite."""

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import ConflictError, NotFoundError, ValidationError
from forum.domain.model import CommentPatch, PostPatch
from forum.domain.repository import CommentRepository, PostRepository, TopicRepository
from forum.domain.value import CommentKey, PostKey, TopicKey
from forum.persistence.tables import comments_table, posts_table
from tests.conftest import make_comment, make_post, make_topic
from tests.harness import create_env_fixture

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})

SCIENCE = TopicKey(topic_id="science")
POST_KEY = PostKey(topic_id="science", post_id="p1")
COMMENT_KEY = CommentKey(topic_id="science", post_id="p1", comment_id="c1")


async def _seed(env) -> None:
    await (await env.get(TopicRepository)).create(make_topic("science"))
    await (await env.get(PostRepository)).create(make_post("science", "p1"))
    await (await env.get(CommentRepository)).create(
        make_comment("science", "p1", "c1")
    )


class TestCreateAndGet:
    """Tests for create and get."""

    @pytest.mark.asyncio
    async def test_round_trip_preserves_fields(self, integration_env):
        # Arrange
        await (await integration_env.get(TopicRepository)).create(make_topic())
        post_repo = await integration_env.get(PostRepository)
        post = make_post(title="Hello", content="World")

        # Act
        await post_repo.create(post)
        fetched = await post_repo.get(post.key, expand=[])

        # Assert
        assert fetched.title == "Hello"
        assert fetched.content == "World"
        assert fetched.votes == 0
        assert fetched.created_at == post.created_at
        assert fetched.deleted_at is None

    @pytest.mark.asyncio
    async def test_duplicate_key_conflicts(self, integration_env):
        await _seed(integration_env)
        post_repo = await integration_env.get(PostRepository)

        with pytest.raises(ConflictError):
            await post_repo.create(make_post("science", "p1"))

    @pytest.mark.asyncio
    async def test_same_post_identity_in_two_topics(self, integration_env):
        """Composite keys keep equal identities under different parents apart."""
        # Arrange
        topic_repo = await integration_env.get(TopicRepository)
        post_repo = await integration_env.get(PostRepository)
        await topic_repo.create(make_topic("science"))
        await topic_repo.create(make_topic("art"))

        # Act
        await post_repo.create(make_post("science", "p1", title="Physics"))
        await post_repo.create(make_post("art", "p1", title="Painting"))

        # Assert
        assert (await post_repo.get(POST_KEY)).title == "Physics"
        art_post = await post_repo.get(PostKey(topic_id="art", post_id="p1"))
        assert art_post.title == "Painting"

    @pytest.mark.asyncio
    async def test_create_under_missing_parent_raises_not_found(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)

        with pytest.raises(NotFoundError, match="post not found"):
            await comment_repo.create(make_comment("science", "p1", "c1"))

    @pytest.mark.asyncio
    async def test_nested_expansion(self, integration_env):
        # Arrange
        await _seed(integration_env)
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)
        await post_repo.create(make_post("science", "p2"))
        await comment_repo.create(make_comment("science", "p1", "c2"))
        topic_repo = await integration_env.get(TopicRepository)

        # Act
        topic = await topic_repo.get(SCIENCE, expand=["posts.comments"])

        # Assert
        assert [p.id for p in topic.posts] == ["p1", "p2"]
        assert [c.id for c in topic.posts[0].comments] == ["c1", "c2"]
        assert topic.posts[1].comments == []

    @pytest.mark.asyncio
    async def test_unknown_relation_raises_validation_error(self, integration_env):
        await _seed(integration_env)
        post_repo = await integration_env.get(PostRepository)

        with pytest.raises(ValidationError):
            await post_repo.get(POST_KEY, expand=["likes"])


class TestUpdate:
    """Tests for partial updates."""

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, integration_env):
        # Arrange
        await _seed(integration_env)
        post_repo = await integration_env.get(PostRepository)
        before = await post_repo.get(POST_KEY)

        # Act
        updated = await post_repo.update(POST_KEY, PostPatch(content=""))

        # Assert
        assert updated.content == ""
        assert updated.title == before.title
        assert updated.created_at == before.created_at
        assert updated.updated_at >= before.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_raises_not_found(self, integration_env):
        await _seed(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        missing = CommentKey(topic_id="science", post_id="p1", comment_id="nope")

        with pytest.raises(NotFoundError):
            await comment_repo.update(missing, CommentPatch(content="x"))


class TestDelete:
    """Tests for soft deletes."""

    @pytest.mark.asyncio
    async def test_delete_topic_cascades(self, integration_env):
        # Arrange
        await _seed(integration_env)
        topic_repo = await integration_env.get(TopicRepository)
        post_repo = await integration_env.get(PostRepository)
        comment_repo = await integration_env.get(CommentRepository)

        # Act
        deleted = await topic_repo.delete(SCIENCE)

        # Assert
        assert deleted.deleted_at is not None
        assert await topic_repo.list() == []
        assert await post_repo.list(SCIENCE) == []
        with pytest.raises(NotFoundError):
            await comment_repo.get(COMMENT_KEY)

    @pytest.mark.asyncio
    async def test_deleted_rows_stay_stored_with_shared_marker(self, integration_env):
        """Soft delete marks the post and its comments without removing rows."""
        # Arrange
        await _seed(integration_env)
        post_repo = await integration_env.get(PostRepository)
        session = await integration_env.get(AsyncSession)

        # Act
        deleted = await post_repo.delete(POST_KEY)

        # Assert
        post_rows = (
            await session.execute(
                select(posts_table).where(
                    posts_table.c.topic_id == "science", posts_table.c.id == "p1"
                )
            )
        ).fetchall()
        comment_rows = (
            await session.execute(
                select(comments_table).where(
                    comments_table.c.topic_id == "science",
                    comments_table.c.post_id == "p1",
                )
            )
        ).fetchall()
        assert len(post_rows) == 1
        assert [row.id for row in comment_rows] == ["c1"]
        assert post_rows[0].deleted_at == deleted.deleted_at
        assert comment_rows[0].deleted_at == deleted.deleted_at
        assert post_rows[0].title == "Title"

    @pytest.mark.asyncio
    async def test_deleted_key_cannot_be_reused(self, integration_env):
        await _seed(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        await comment_repo.delete(COMMENT_KEY)

        with pytest.raises(ConflictError):
            await comment_repo.create(make_comment("science", "p1", "c1"))

    @pytest.mark.asyncio
    async def test_delete_post_leaves_sibling_posts(self, integration_env):
        await _seed(integration_env)
        post_repo = await integration_env.get(PostRepository)
        await post_repo.create(make_post("science", "p2"))

        await post_repo.delete(POST_KEY)

        assert [p.id for p in await post_repo.list(SCIENCE)] == ["p2"]


class TestVote:
    """Tests for the vote counter."""

    @pytest.mark.asyncio
    async def test_vote_moves_counter_without_touching_timestamps(
        self, integration_env
    ):
        # Arrange
        await _seed(integration_env)
        comment_repo = await integration_env.get(CommentRepository)
        before = await comment_repo.get(COMMENT_KEY)

        # Act
        await comment_repo.vote(COMMENT_KEY, 1)
        await comment_repo.vote(COMMENT_KEY, 1)
        await comment_repo.vote(COMMENT_KEY, -1)

        # Assert
        after = await comment_repo.get(COMMENT_KEY)
        assert after.votes == 1
        assert after.updated_at == before.updated_at

    @pytest.mark.asyncio
    async def test_vote_on_deleted_post_raises_not_found(self, integration_env):
        await _seed(integration_env)
        post_repo = await integration_env.get(PostRepository)
        await post_repo.delete(POST_KEY)

        with pytest.raises(NotFoundError):
            await post_repo.vote(POST_KEY, 1)
