"""Delete post use case."""

from pydantic import BaseModel

from forum.application.usecase.common import PostView
from forum.domain.service import PostService
from forum.domain.value import ForumIds


class DeletePostRequest(BaseModel):
    """Delete post request."""

    topic_id: str
    post_id: str


class DeletePostResponse(PostView):
    """Delete post response (the post with ``deleted_at`` set)."""

    pass


class DeletePostUseCase:
    """Use case for soft-deleting a post and its comments."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        ids = ForumIds(topic_id=request.topic_id, post_id=request.post_id)
        post = await self.post_service.delete_post(ids.post_key())
        return DeletePostResponse.from_entity(post)
