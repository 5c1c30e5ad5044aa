"""Post domain service."""

from collections.abc import Iterable
from uuid import uuid4

import logfire

from forum.domain.model import Post, PostPatch
from forum.domain.repository import PostRepository
from forum.domain.value import PostId, PostKey, TopicKey

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def create_post(self, topic_key: TopicKey, title: str, content: str) -> Post:
        """Create a post in a topic.

        Args:
            topic_key: Key of the owning topic
            title: Post title
            content: Post body

        Returns:
            Created post with a freshly generated identity

        Raises:
            NotFoundError: If the topic is missing or deleted
        """
        with logfire.span(
            "post_service.create_post", topic_key=str(topic_key), title=title
        ):
            post = Post(
                id=PostId(str(uuid4())),
                topic_id=topic_key.topic_id,
                title=title,
                content=content,
            )
            saved = await self.post_repository.create(post)
            logfire.info("Post created", post_key=str(saved.key), title=saved.title)
            return saved

    async def get_post(self, key: PostKey, expand: Iterable[str] = ()) -> Post:
        """Get a live post, optionally with its comments.

        Raises:
            NotFoundError: If no live post matches the full key
        """
        with logfire.span("post_service.get_post", post_key=str(key)):
            return await self.post_repository.get(key, expand)

    async def list_posts(self, topic_key: TopicKey) -> list[Post]:
        """List the live posts of a topic, oldest first."""
        with logfire.span("post_service.list_posts", topic_key=str(topic_key)):
            posts = await self.post_repository.list(topic_key)
            logfire.info("Posts listed", topic_key=str(topic_key), count=len(posts))
            return posts

    async def update_post(self, key: PostKey, patch: PostPatch) -> Post:
        """Update the fields set on the patch.

        Args:
            key: Post key
            patch: Fields to write; unset fields are kept

        Returns:
            Post as stored after the update

        Raises:
            NotFoundError: If no live post matches the full key
        """
        with logfire.span(
            "post_service.update_post",
            post_key=str(key),
            fields=sorted(patch.changes()),
        ):
            post = await self.post_repository.update(key, patch)
            logfire.info("Post updated", post_key=str(key))
            return post

    async def delete_post(self, key: PostKey) -> Post:
        """Soft-delete a post and its comments."""
        with logfire.span("post_service.delete_post", post_key=str(key)):
            post = await self.post_repository.delete(key)
            logfire.info("Post deleted", post_key=str(key))
            return post
