"""Update post use case."""

from typing import Optional

from pydantic import BaseModel, Field

from forum.application.usecase.common import PostView
from forum.domain.model import PostPatch
from forum.domain.service import PostService
from forum.domain.value import ForumIds


class UpdatePostRequest(BaseModel):
    """Update post request.

    Only fields present in the request are written; ``None`` leaves a field
    unchanged and an empty string clears it.
    """

    topic_id: str
    post_id: str
    title: Optional[str] = Field(default=None, max_length=300)
    content: Optional[str] = Field(default=None, max_length=10000)


class UpdatePostResponse(PostView):
    """Update post response."""

    pass


class UpdatePostUseCase:
    """Use case for partially updating a post's title and content."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: UpdatePostRequest) -> UpdatePostResponse:
        """Execute update post flow.

        Args:
            request: Update post request with the fields to change

        Returns:
            Post as stored after the update

        Raises:
            ValidationError: If an identity is empty
            NotFoundError: If no live post matches the (topic, post) pair
        """
        ids = ForumIds(topic_id=request.topic_id, post_id=request.post_id)
        patch = PostPatch(
            **request.model_dump(
                include={"title", "content"}, exclude_unset=True, exclude_none=True
            )
        )
        post = await self.post_service.update_post(ids.post_key(), patch)
        return UpdatePostResponse.from_entity(post)
