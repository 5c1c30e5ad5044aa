"""Delete comment use case."""

from pydantic import BaseModel

from forum.application.usecase.common import CommentView
from forum.domain.service import CommentService
from forum.domain.value import ForumIds


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    topic_id: str
    post_id: str
    comment_id: str


class DeleteCommentResponse(CommentView):
    """Delete comment response (the comment with ``deleted_at`` set)."""

    pass


class DeleteCommentUseCase:
    """Use case for soft-deleting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        ids = ForumIds(**request.model_dump())
        comment = await self.comment_service.delete_comment(ids.comment_key())
        return DeleteCommentResponse.from_entity(comment)
