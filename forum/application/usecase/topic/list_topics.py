"""List topics use case."""

from pydantic import BaseModel

from forum.application.usecase.common import TopicView
from forum.domain.service import TopicService


class ListTopicsRequest(BaseModel):
    """List topics request."""

    pass


class ListTopicsResponse(BaseModel):
    """List topics response."""

    topics: list[TopicView]


class ListTopicsUseCase:
    """Use case for listing every live topic."""

    def __init__(self, topic_service: TopicService) -> None:
        """Initialize list topics use case.

        Args:
            topic_service: Topic domain service
        """
        self.topic_service = topic_service

    async def execute(self, request: ListTopicsRequest) -> ListTopicsResponse:
        topics = await self.topic_service.list_topics()
        return ListTopicsResponse(topics=[TopicView.from_entity(t) for t in topics])
