"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from forum.application.usecase.vote import (
    CastVoteRequest,
    CastVoteResponse,
    CastVoteUseCase,
)
from forum.domain.value import VoteDirection

router = APIRouter(
    prefix="/topics/{topic_id}/posts/{post_id}",
    tags=["votes"],
    route_class=DishkaRoute,
)


@router.post("/upvote", response_model=CastVoteResponse)
async def upvote_post(
    topic_id: str,
    post_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Upvote a post.

    Args:
        topic_id: Topic of the post
        post_id: Post identity
        cast_vote_use_case: Cast vote use case from DI

    Returns:
        The post's votes counter after the vote
    """
    return await cast_vote_use_case.execute(
        CastVoteRequest(topic_id=topic_id, post_id=post_id, direction=VoteDirection.UP)
    )


@router.post("/downvote", response_model=CastVoteResponse)
async def downvote_post(
    topic_id: str,
    post_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Downvote a post."""
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            topic_id=topic_id, post_id=post_id, direction=VoteDirection.DOWN
        )
    )


@router.post("/comments/{comment_id}/upvote", response_model=CastVoteResponse)
async def upvote_comment(
    topic_id: str,
    post_id: str,
    comment_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Upvote a comment."""
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            topic_id=topic_id,
            post_id=post_id,
            comment_id=comment_id,
            direction=VoteDirection.UP,
        )
    )


@router.post("/comments/{comment_id}/downvote", response_model=CastVoteResponse)
async def downvote_comment(
    topic_id: str,
    post_id: str,
    comment_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
) -> CastVoteResponse:
    """Downvote a comment."""
    return await cast_vote_use_case.execute(
        CastVoteRequest(
            topic_id=topic_id,
            post_id=post_id,
            comment_id=comment_id,
            direction=VoteDirection.DOWN,
        )
    )
