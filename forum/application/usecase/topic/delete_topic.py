"""Delete topic use case."""

from pydantic import BaseModel

from forum.application.usecase.common import TopicView
from forum.domain.service import TopicService
from forum.domain.value import ForumIds


class DeleteTopicRequest(BaseModel):
    """Delete topic request."""

    topic_id: str


class DeleteTopicResponse(TopicView):
    """Delete topic response (the topic with ``deleted_at`` set)."""

    pass


class DeleteTopicUseCase:
    """Use case for soft-deleting a topic and everything below it."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize delete topic use case.

        Args:
            topic_service: Topic domain service
        """
        self.topic_service = topic_service

    async def execute(self, request: DeleteTopicRequest) -> DeleteTopicResponse:
        """Execute delete topic flow.

        Raises:
            ValidationError: If the identity is empty
            NotFoundError: If the topic is missing or already deleted
        """
        key = ForumIds(topic_id=request.topic_id).topic_key()
        topic = await self.topic_service.delete_topic(key)
        return DeleteTopicResponse.from_entity(topic)
