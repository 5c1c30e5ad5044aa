"""Get post use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.common import PostView
from forum.domain.service import PostService
from forum.domain.value import ForumIds


class GetPostRequest(BaseModel):
    """Get post request."""

    topic_id: str
    post_id: str
    expand: list[str] = Field(default_factory=lambda: ["comments"])


class GetPostResponse(PostView):
    """Get post response."""

    pass


class GetPostUseCase:
    """Use case for reading a post, by default with its comments."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> GetPostResponse:
        """Execute get post flow.

        Raises:
            ValidationError: If an identity is empty or a relation is unknown
            NotFoundError: If no live post matches the (topic, post) pair
        """
        ids = ForumIds(topic_id=request.topic_id, post_id=request.post_id)
        post = await self.post_service.get_post(ids.post_key(), request.expand)
        return GetPostResponse.from_entity(post)
