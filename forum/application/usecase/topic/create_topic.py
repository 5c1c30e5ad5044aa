"""Create topic use case."""

from pydantic import BaseModel

from forum.application.usecase.common import TopicView
from forum.domain.service import TopicService
from forum.domain.value import ForumIds


class CreateTopicRequest(BaseModel):
    """Create topic request."""

    topic_id: str


class CreateTopicResponse(TopicView):
    """Create topic response."""

    pass


class CreateTopicUseCase:
    """Use case for creating a topic under a caller-chosen identity."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize create topic use case.

        Args:
            topic_service: Topic domain service
        """
        self.topic_service = topic_service

    async def execute(self, request: CreateTopicRequest) -> CreateTopicResponse:
        """Execute create topic flow.

        Args:
            request: Create topic request

        Returns:
            Created topic

        Raises:
            ValidationError: If the topic identity is empty
            ConflictError: If the identity is already taken
        """
        key = ForumIds(topic_id=request.topic_id).topic_key()
        topic = await self.topic_service.create_topic(key.topic_id)
        return CreateTopicResponse.from_entity(topic)
