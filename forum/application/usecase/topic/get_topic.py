"""Get topic use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.common import TopicView
from forum.domain.service import TopicService
from forum.domain.value import ForumIds


class GetTopicRequest(BaseModel):
    """Get topic request."""

    topic_id: str
    expand: list[str] = Field(default_factory=lambda: ["posts"])


class GetTopicResponse(TopicView):
    """Get topic response."""

    pass


class GetTopicUseCase:
    """Use case for reading a topic, by default with its posts."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize get topic use case.

        Args:
            topic_service: Topic domain service
        """
        self.topic_service = topic_service

    async def execute(self, request: GetTopicRequest) -> GetTopicResponse:
        """Execute get topic flow.

        Raises:
            ValidationError: If the identity is empty or a relation is unknown
            NotFoundError: If the topic is missing or deleted
        """
        key = ForumIds(topic_id=request.topic_id).topic_key()
        topic = await self.topic_service.get_topic(key, request.expand)
        return GetTopicResponse.from_entity(topic)
