"""Unit tests for TopicService."""

import pytest

from forum.domain.error import ConflictError, NotFoundError
from forum.domain.model import TopicPatch
from forum.domain.repository import CommentRepository, PostRepository
from forum.domain.service import TopicService
from forum.domain.value import CommentKey, PostKey, TopicId, TopicKey
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateTopic:
    """Tests for create_topic method."""

    @pytest.mark.asyncio
    async def test_create_then_get_round_trips(self, unit_env):
        """A created topic is readable by its key."""
        # Arrange
        topic_service = await unit_env.get(TopicService)

        # Act
        created = await topic_service.create_topic(TopicId("science"))
        fetched = await topic_service.get_topic(TopicKey(topic_id="science"))

        # Assert
        assert fetched.id == created.id == "science"
        assert fetched.deleted_at is None
        assert fetched.posts is None

    @pytest.mark.asyncio
    async def test_duplicate_identity_conflicts(self, unit_env):
        """Creating the same topic twice should conflict."""
        # Arrange
        topic_service = await unit_env.get(TopicService)
        await topic_service.create_topic(TopicId("science"))

        # Act & Assert
        with pytest.raises(ConflictError):
            await topic_service.create_topic(TopicId("science"))

    @pytest.mark.asyncio
    async def test_deleted_identity_still_conflicts(self, unit_env):
        """A soft-deleted topic keeps its identity."""
        # Arrange
        topic_service = await unit_env.get(TopicService)
        await topic_service.create_topic(TopicId("science"))
        await topic_service.delete_topic(TopicKey(topic_id="science"))

        # Act & Assert
        with pytest.raises(ConflictError):
            await topic_service.create_topic(TopicId("science"))


class TestGetTopic:
    """Tests for get_topic method."""

    @pytest.mark.asyncio
    async def test_missing_topic_raises_not_found(self, unit_env):
        topic_service = await unit_env.get(TopicService)

        with pytest.raises(NotFoundError, match="topic not found: nowhere"):
            await topic_service.get_topic(TopicKey(topic_id="nowhere"))

    @pytest.mark.asyncio
    async def test_expand_posts_returns_live_posts_only(self, unit_env):
        """Expanded posts exclude deleted posts and keep insertion order."""
        # Arrange
        topic_service = await unit_env.get(TopicService)
        post_repo = await unit_env.get(PostRepository)
        await topic_service.create_topic(TopicId("science"))
        await post_repo.create(make_post(post_id="p1"))
        await post_repo.create(make_post(post_id="p2"))
        await post_repo.create(make_post(post_id="p3"))
        await post_repo.delete(PostKey(topic_id="science", post_id="p2"))

        # Act
        topic = await topic_service.get_topic(
            TopicKey(topic_id="science"), expand=["posts"]
        )

        # Assert
        assert [p.id for p in topic.posts] == ["p1", "p3"]
        assert all(p.comments is None for p in topic.posts)

    @pytest.mark.asyncio
    async def test_nested_expansion_loads_comments(self, unit_env):
        # Arrange
        topic_service = await unit_env.get(TopicService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await topic_service.create_topic(TopicId("science"))
        await post_repo.create(make_post(post_id="p1"))
        await post_repo.create(make_post(post_id="p2"))
        await comment_repo.create(make_comment(post_id="p1", comment_id="c1"))

        # Act
        topic = await topic_service.get_topic(
            TopicKey(topic_id="science"), expand=["posts.comments"]
        )

        # Assert
        assert [c.id for c in topic.posts[0].comments] == ["c1"]
        assert topic.posts[1].comments == []


class TestDeleteTopic:
    """Tests for delete_topic method."""

    @pytest.mark.asyncio
    async def test_delete_cascades_to_posts_and_comments(self, unit_env):
        """Deleting a topic hides its posts and their comments."""
        # Arrange
        topic_service = await unit_env.get(TopicService)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        await topic_service.create_topic(TopicId("science"))
        await post_repo.create(make_post(post_id="p1"))
        await comment_repo.create(make_comment(post_id="p1", comment_id="c1"))

        # Act
        deleted = await topic_service.delete_topic(TopicKey(topic_id="science"))

        # Assert
        assert deleted.deleted_at is not None
        with pytest.raises(NotFoundError):
            await post_repo.get(PostKey(topic_id="science", post_id="p1"))
        with pytest.raises(NotFoundError):
            await comment_repo.get(
                CommentKey(topic_id="science", post_id="p1", comment_id="c1")
            )
        assert await topic_service.list_topics() == []

    @pytest.mark.asyncio
    async def test_delete_twice_raises_not_found(self, unit_env):
        topic_service = await unit_env.get(TopicService)
        await topic_service.create_topic(TopicId("science"))
        await topic_service.delete_topic(TopicKey(topic_id="science"))

        with pytest.raises(NotFoundError):
            await topic_service.delete_topic(TopicKey(topic_id="science"))


class TestListTopics:
    """Tests for list_topics method."""

    @pytest.mark.asyncio
    async def test_empty_store_lists_nothing(self, unit_env):
        topic_service = await unit_env.get(TopicService)

        assert await topic_service.list_topics() == []

    @pytest.mark.asyncio
    async def test_lists_in_creation_order(self, unit_env):
        topic_service = await unit_env.get(TopicService)
        for topic_id in ("b", "a", "c"):
            await topic_service.create_topic(TopicId(topic_id))

        topics = await topic_service.list_topics()

        assert [t.id for t in topics] == ["b", "a", "c"]


class TestUpdateTopic:
    """Tests for update_topic method."""

    @pytest.mark.asyncio
    async def test_empty_patch_returns_topic_unchanged(self, unit_env):
        topic_service = await unit_env.get(TopicService)
        created = await topic_service.create_topic(TopicId("science"))

        updated = await topic_service.update_topic(created.key, TopicPatch())

        assert updated == created

    @pytest.mark.asyncio
    async def test_update_missing_topic_raises_not_found(self, unit_env):
        topic_service = await unit_env.get(TopicService)

        with pytest.raises(NotFoundError):
            await topic_service.update_topic(TopicKey(topic_id="nowhere"), TopicPatch())
