"""List comments use case."""

from pydantic import BaseModel

from forum.application.usecase.common import CommentView
from forum.domain.service import CommentService
from forum.domain.value import ForumIds


class ListCommentsRequest(BaseModel):
    """List comments request."""

    topic_id: str
    post_id: str


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[CommentView]


class ListCommentsUseCase:
    """Use case for listing the live comments of one post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        ids = ForumIds(topic_id=request.topic_id, post_id=request.post_id)
        comments = await self.comment_service.list_comments(ids.post_key())
        return ListCommentsResponse(
            comments=[CommentView.from_entity(c) for c in comments]
        )
