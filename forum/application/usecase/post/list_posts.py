"""List posts use case."""

from pydantic import BaseModel

from forum.application.usecase.common import PostView
from forum.domain.service import PostService
from forum.domain.value import ForumIds


class ListPostsRequest(BaseModel):
    """List posts request."""

    topic_id: str


class ListPostsResponse(BaseModel):
    """List posts response."""

    posts: list[PostView]


class ListPostsUseCase:
    """Use case for listing the live posts of one topic."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> ListPostsResponse:
        topic_key = ForumIds(topic_id=request.topic_id).topic_key()
        posts = await self.post_service.list_posts(topic_key)
        return ListPostsResponse(posts=[PostView.from_entity(p) for p in posts])
