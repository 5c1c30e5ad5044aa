"""Update comment use case."""

from typing import Optional

from pydantic import BaseModel, Field

from forum.application.usecase.common import CommentView
from forum.domain.model import CommentPatch
from forum.domain.service import CommentService
from forum.domain.value import ForumIds


class UpdateCommentRequest(BaseModel):
    """Update comment request.

    ``content=None`` leaves the comment unchanged.
    """

    topic_id: str
    post_id: str
    comment_id: str
    content: Optional[str] = Field(default=None, max_length=10000)


class UpdateCommentResponse(CommentView):
    """Update comment response."""

    pass


class UpdateCommentUseCase:
    """Use case for editing a comment's content."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Comment as stored after the update

        Raises:
            ValidationError: If an identity is empty
            NotFoundError: If no live comment matches the full key
        """
        ids = ForumIds(
            topic_id=request.topic_id,
            post_id=request.post_id,
            comment_id=request.comment_id,
        )
        patch = CommentPatch(
            **request.model_dump(
                include={"content"}, exclude_unset=True, exclude_none=True
            )
        )
        comment = await self.comment_service.update_comment(ids.comment_key(), patch)
        return UpdateCommentResponse.from_entity(comment)
