"""Create comment use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.common import CommentView
from forum.domain.service import CommentService
from forum.domain.value import ForumIds


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    topic_id: str
    post_id: str
    content: str = Field(default="", max_length=10000)


class CreateCommentResponse(CommentView):
    """Create comment response."""

    pass


class CreateCommentUseCase:
    """Use case for commenting on a post."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            Created comment details

        Raises:
            ValidationError: If an identity is empty
            NotFoundError: If the post is missing, deleted, or in another topic
        """
        ids = ForumIds(topic_id=request.topic_id, post_id=request.post_id)
        comment = await self.comment_service.create_comment(
            ids.post_key(), content=request.content
        )
        return CreateCommentResponse.from_entity(comment)
