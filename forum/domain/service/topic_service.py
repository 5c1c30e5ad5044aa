"""Topic domain service."""

from collections.abc import Iterable

import logfire

from forum.domain.model import Topic, TopicPatch
from forum.domain.repository import TopicRepository
from forum.domain.value import TopicId, TopicKey

from .base import Service


class TopicService(Service):
    """Domain service for topic operations."""

    def __init__(self, topic_repository: TopicRepository) -> None:
        """Initialize topic service.

        Args:
            topic_repository: Topic repository
        """
        self.topic_repository = topic_repository

    async def create_topic(self, topic_id: TopicId) -> Topic:
        """Create a topic under a caller-chosen identity.

        Args:
            topic_id: Topic identity

        Returns:
            Created topic

        Raises:
            ConflictError: If the identity is already taken
        """
        with logfire.span("topic_service.create_topic", topic_id=str(topic_id)):
            topic = await self.topic_repository.create(Topic(id=topic_id))
            logfire.info("Topic created", topic_id=str(topic.id))
            return topic

    async def get_topic(self, key: TopicKey, expand: Iterable[str] = ()) -> Topic:
        """Get a live topic, optionally with its posts.

        Raises:
            NotFoundError: If the topic is missing or deleted
        """
        with logfire.span("topic_service.get_topic", topic_key=str(key)):
            return await self.topic_repository.get(key, expand)

    async def list_topics(self) -> list[Topic]:
        """List every live topic."""
        with logfire.span("topic_service.list_topics"):
            topics = await self.topic_repository.list()
            logfire.info("Topics listed", count=len(topics))
            return topics

    async def update_topic(self, key: TopicKey, patch: TopicPatch) -> Topic:
        """Apply a topic patch and return the re-read topic."""
        with logfire.span("topic_service.update_topic", topic_key=str(key)):
            return await self.topic_repository.update(key, patch)

    async def delete_topic(self, key: TopicKey) -> Topic:
        """Soft-delete a topic together with its posts and their comments.

        Raises:
            NotFoundError: If the topic is missing or already deleted
        """
        with logfire.span("topic_service.delete_topic", topic_key=str(key)):
            topic = await self.topic_repository.delete(key)
            logfire.info("Topic deleted", topic_key=str(key))
            return topic
