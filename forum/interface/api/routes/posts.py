"""Post routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, status
from pydantic import BaseModel, Field

from forum.application.usecase.post import (
    CreatePostRequest,
    CreatePostResponse,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostResponse,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsResponse,
    ListPostsUseCase,
    UpdatePostRequest,
    UpdatePostResponse,
    UpdatePostUseCase,
)

router = APIRouter(
    prefix="/topics/{topic_id}/posts", tags=["posts"], route_class=DishkaRoute
)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    title: str = Field(default="", max_length=300)
    content: str = Field(default="", max_length=10000)


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are left unchanged."""

    title: Optional[str] = Field(default=None, max_length=300)
    content: Optional[str] = Field(default=None, max_length=10000)


@router.get("", response_model=ListPostsResponse)
async def list_posts(
    topic_id: str,
    list_posts_use_case: FromDishka[ListPostsUseCase],
) -> ListPostsResponse:
    """List the live posts of a topic."""
    return await list_posts_use_case.execute(ListPostsRequest(topic_id=topic_id))


@router.post("", response_model=CreatePostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    topic_id: str,
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> CreatePostResponse:
    """Create a post in a topic.

    Args:
        topic_id: Owning topic
        request: Post title and content
        create_post_use_case: Create post use case from DI

    Returns:
        Created post with its generated identity
    """
    return await create_post_use_case.execute(
        CreatePostRequest(
            topic_id=topic_id, title=request.title, content=request.content
        )
    )


@router.get("/{post_id}", response_model=GetPostResponse)
async def get_post(
    topic_id: str,
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    expand: list[str] = Query(default=["comments"]),
) -> GetPostResponse:
    """Get a post, with its comments unless ``expand`` says otherwise."""
    return await get_post_use_case.execute(
        GetPostRequest(
            topic_id=topic_id, post_id=post_id, expand=[e for e in expand if e]
        )
    )


@router.patch("/{post_id}", response_model=UpdatePostResponse)
async def update_post(
    topic_id: str,
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> UpdatePostResponse:
    """Update the title and/or content of a post.

    Args:
        topic_id: Owning topic
        post_id: Post identity
        request: Fields to change
        update_post_use_case: Update post use case from DI

    Returns:
        Post as stored after the update
    """
    return await update_post_use_case.execute(
        UpdatePostRequest(
            topic_id=topic_id,
            post_id=post_id,
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    topic_id: str,
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
) -> DeletePostResponse:
    """Soft-delete a post and its comments."""
    return await delete_post_use_case.execute(
        DeletePostRequest(topic_id=topic_id, post_id=post_id)
    )
