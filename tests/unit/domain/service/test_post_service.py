"""Unit tests for PostService."""

import pytest

from forum.domain.error import NotFoundError
from forum.domain.model import PostPatch
from forum.domain.service import PostService, TopicService
from forum.domain.value import PostKey, TopicId, TopicKey
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _seed_topics(unit_env, *topic_ids: str) -> None:
    topic_service = await unit_env.get(TopicService)
    for topic_id in topic_ids:
        await topic_service.create_topic(TopicId(topic_id))


class TestCreatePost:
    """Tests for create_post method."""

    @pytest.mark.asyncio
    async def test_create_post_generates_identity(self, unit_env):
        """A created post gets a fresh identity and zero votes."""
        # Arrange
        await _seed_topics(unit_env, "science")
        post_service = await unit_env.get(PostService)
        topic_key = TopicKey(topic_id="science")

        # Act
        first = await post_service.create_post(topic_key, "First", "Body")
        second = await post_service.create_post(topic_key, "Second", "Body")

        # Assert
        assert first.id != second.id
        assert first.votes == 0
        assert first.topic_id == "science"
        fetched = await post_service.get_post(first.key)
        assert fetched.title == "First"
        assert fetched.content == "Body"

    @pytest.mark.asyncio
    async def test_create_post_in_missing_topic_raises_not_found(self, unit_env):
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError, match="topic not found"):
            await post_service.create_post(TopicKey(topic_id="nowhere"), "T", "C")


class TestGetPost:
    """Tests for get_post method."""

    @pytest.mark.asyncio
    async def test_post_is_not_found_under_another_topic(self, unit_env):
        """A post key with the wrong topic must not find the post."""
        # Arrange
        await _seed_topics(unit_env, "science", "art")
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(TopicKey(topic_id="science"), "T", "C")

        # Act & Assert
        with pytest.raises(NotFoundError):
            await post_service.get_post(PostKey(topic_id="art", post_id=post.id))


class TestUpdatePost:
    """Tests for update_post method."""

    @pytest.mark.asyncio
    async def test_partial_update_preserves_untouched_fields(self, unit_env):
        # Arrange
        await _seed_topics(unit_env, "science")
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(
            TopicKey(topic_id="science"), "Old title", "Old body"
        )

        # Act
        updated = await post_service.update_post(post.key, PostPatch(title="New title"))

        # Assert
        assert updated.title == "New title"
        assert updated.content == "Old body"
        assert updated.votes == 0
        assert updated.updated_at >= post.updated_at

    @pytest.mark.asyncio
    async def test_patch_can_clear_a_field(self, unit_env):
        """Setting a field to an empty string is a real change."""
        # Arrange
        await _seed_topics(unit_env, "science")
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(TopicKey(topic_id="science"), "T", "Body")

        # Act
        updated = await post_service.update_post(post.key, PostPatch(content=""))

        # Assert
        assert updated.content == ""
        assert updated.title == "T"

    @pytest.mark.asyncio
    async def test_empty_patch_returns_post_unchanged(self, unit_env):
        await _seed_topics(unit_env, "science")
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(TopicKey(topic_id="science"), "T", "C")

        updated = await post_service.update_post(post.key, PostPatch())

        assert updated == post

    @pytest.mark.asyncio
    async def test_update_deleted_post_raises_not_found(self, unit_env):
        await _seed_topics(unit_env, "science")
        post_service = await unit_env.get(PostService)
        post = await post_service.create_post(TopicKey(topic_id="science"), "T", "C")
        await post_service.delete_post(post.key)

        with pytest.raises(NotFoundError):
            await post_service.update_post(post.key, PostPatch(title="Nope"))


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_list_is_scoped_to_topic(self, unit_env):
        # Arrange
        await _seed_topics(unit_env, "science", "art")
        post_service = await unit_env.get(PostService)
        science = TopicKey(topic_id="science")
        art = TopicKey(topic_id="art")
        s1 = await post_service.create_post(science, "S1", "")
        s2 = await post_service.create_post(science, "S2", "")
        await post_service.create_post(art, "A1", "")

        # Act
        posts = await post_service.list_posts(science)

        # Assert
        assert [p.id for p in posts] == [s1.id, s2.id]

    @pytest.mark.asyncio
    async def test_list_excludes_deleted_posts(self, unit_env):
        await _seed_topics(unit_env, "science")
        post_service = await unit_env.get(PostService)
        science = TopicKey(topic_id="science")
        post = await post_service.create_post(science, "T", "C")
        await post_service.delete_post(post.key)

        assert await post_service.list_posts(science) == []
