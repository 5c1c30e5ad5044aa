"""Create post use case."""

from pydantic import BaseModel, Field

from forum.application.usecase.common import PostView
from forum.domain.service import PostService
from forum.domain.value import ForumIds


class CreatePostRequest(BaseModel):
    """Create post request."""

    topic_id: str
    title: str = Field(default="", max_length=300)
    content: str = Field(default="", max_length=10000)


class CreatePostResponse(PostView):
    """Create post response."""

    pass


class CreatePostUseCase:
    """Use case for creating a post in a topic."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: CreatePostRequest) -> CreatePostResponse:
        """Execute create post flow.

        Args:
            request: Create post request

        Returns:
            Created post details, including its generated identity

        Raises:
            ValidationError: If the topic identity is empty
            NotFoundError: If the topic is missing or deleted
        """
        topic_key = ForumIds(topic_id=request.topic_id).topic_key()
        post = await self.post_service.create_post(
            topic_key, title=request.title, content=request.content
        )
        return CreatePostResponse.from_entity(post)
