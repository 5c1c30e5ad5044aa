"""Topic routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from forum.application.usecase.topic import (
    CreateTopicRequest,
    CreateTopicResponse,
    CreateTopicUseCase,
    DeleteTopicRequest,
    DeleteTopicResponse,
    DeleteTopicUseCase,
    GetTopicRequest,
    GetTopicResponse,
    GetTopicUseCase,
    ListTopicsRequest,
    ListTopicsResponse,
    ListTopicsUseCase,
)

router = APIRouter(prefix="/topics", tags=["topics"], route_class=DishkaRoute)


class CreateTopicAPIRequest(BaseModel):
    """API request for creating a topic."""

    # Identities are single path segments
    id: str = Field(min_length=1, max_length=255, pattern=r"^[^/]+$")


@router.get("", response_model=ListTopicsResponse)
async def list_topics(
    list_topics_use_case: FromDishka[ListTopicsUseCase],
) -> ListTopicsResponse:
    """List every live topic."""
    return await list_topics_use_case.execute(ListTopicsRequest())


@router.post(
    "", response_model=CreateTopicResponse, status_code=status.HTTP_201_CREATED
)
async def create_topic(
    request: CreateTopicAPIRequest,
    create_topic_use_case: FromDishka[CreateTopicUseCase],
) -> CreateTopicResponse:
    """Create a topic under the identity chosen by the caller.

    Args:
        request: Topic identity
        create_topic_use_case: Create topic use case from DI

    Returns:
        Created topic
    """
    return await create_topic_use_case.execute(CreateTopicRequest(topic_id=request.id))


@router.get("/{topic_id}", response_model=GetTopicResponse)
async def get_topic(
    topic_id: str,
    get_topic_use_case: FromDishka[GetTopicUseCase],
    expand: list[str] = Query(default=["posts"]),
) -> GetTopicResponse:
    """Get a topic.

    Posts are expanded unless ``expand`` says otherwise; ``expand=posts.comments``
    also loads each post's comments.
    """
    return await get_topic_use_case.execute(
        GetTopicRequest(topic_id=topic_id, expand=[e for e in expand if e])
    )


@router.delete("/{topic_id}", response_model=DeleteTopicResponse)
async def delete_topic(
    topic_id: str,
    delete_topic_use_case: FromDishka[DeleteTopicUseCase],
) -> DeleteTopicResponse:
    """Soft-delete a topic together with its posts and comments."""
    return await delete_topic_use_case.execute(DeleteTopicRequest(topic_id=topic_id))
