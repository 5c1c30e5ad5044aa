"""Get comment use case."""

from pydantic import BaseModel

from forum.application.usecase.common import CommentView
from forum.domain.service import CommentService
from forum.domain.value import ForumIds


class GetCommentRequest(BaseModel):
    """Get comment request."""

    topic_id: str
    post_id: str
    comment_id: str


class GetCommentResponse(CommentView):
    """Get comment response."""

    pass


class GetCommentUseCase:
    """Use case for reading one comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentRequest) -> GetCommentResponse:
        ids = ForumIds(**request.model_dump())
        comment = await self.comment_service.get_comment(ids.comment_key())
        return GetCommentResponse.from_entity(comment)
