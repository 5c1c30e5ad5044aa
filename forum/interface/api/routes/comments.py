"""Comment routes."""

from typing import Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel, Field

from forum.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentRequest,
    GetCommentResponse,
    GetCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)

router = APIRouter(
    prefix="/topics/{topic_id}/posts/{post_id}/comments",
    tags=["comments"],
    route_class=DishkaRoute,
)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str = Field(default="", max_length=10000)


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: Optional[str] = Field(default=None, max_length=10000)


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    topic_id: str,
    post_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
) -> ListCommentsResponse:
    """List the live comments of a post."""
    return await list_comments_use_case.execute(
        ListCommentsRequest(topic_id=topic_id, post_id=post_id)
    )


@router.post(
    "", response_model=CreateCommentResponse, status_code=status.HTTP_201_CREATED
)
async def create_comment(
    topic_id: str,
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Comment on a post.

    Args:
        topic_id: Topic of the post
        post_id: Post being commented on
        request: Comment content
        create_comment_use_case: Create comment use case from DI

    Returns:
        Created comment with its generated identity
    """
    return await create_comment_use_case.execute(
        CreateCommentRequest(
            topic_id=topic_id, post_id=post_id, content=request.content
        )
    )


@router.get("/{comment_id}", response_model=GetCommentResponse)
async def get_comment(
    topic_id: str,
    post_id: str,
    comment_id: str,
    get_comment_use_case: FromDishka[GetCommentUseCase],
) -> GetCommentResponse:
    """Get one comment."""
    return await get_comment_use_case.execute(
        GetCommentRequest(topic_id=topic_id, post_id=post_id, comment_id=comment_id)
    )


@router.patch("/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    topic_id: str,
    post_id: str,
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
) -> UpdateCommentResponse:
    """Update the content of a comment."""
    return await update_comment_use_case.execute(
        UpdateCommentRequest(
            topic_id=topic_id,
            post_id=post_id,
            comment_id=comment_id,
            **request.model_dump(exclude_unset=True),
        )
    )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    topic_id: str,
    post_id: str,
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Soft-delete a comment."""
    return await delete_comment_use_case.execute(
        DeleteCommentRequest(topic_id=topic_id, post_id=post_id, comment_id=comment_id)
    )
