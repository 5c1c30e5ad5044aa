"""Cast vote use case."""

from typing import Optional

from pydantic import BaseModel

from forum.domain.service import CommentService, PostService, VoteService
from forum.domain.value import CommentKey, ForumIds, VotableType, VoteDirection


class CastVoteRequest(BaseModel):
    """Cast vote request.

    Addresses a comment when ``comment_id`` is given, otherwise a post.
    """

    topic_id: str
    post_id: str
    comment_id: Optional[str] = None
    direction: VoteDirection


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    votable_type: VotableType
    topic_id: str
    post_id: str
    comment_id: Optional[str] = None
    votes: int


class CastVoteUseCase:
    """Use case for upvoting or downvoting a post or comment."""

    def __init__(
        self,
        vote_service: VoteService,
        post_service: PostService,
        comment_service: CommentService,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            post_service: Post domain service, to read back the counter
            comment_service: Comment domain service, to read back the counter
        """
        self.vote_service = vote_service
        self.post_service = post_service
        self.comment_service = comment_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Args:
            request: Cast vote request

        Returns:
            The voted entity's identity and its counter after the vote

        Raises:
            ValidationError: If an identity is empty
            NotFoundError: If no live entity matches the key
        """
        ids = ForumIds(
            topic_id=request.topic_id,
            post_id=request.post_id,
            comment_id=request.comment_id,
        )
        key = ids.comment_key() if request.comment_id is not None else ids.post_key()

        await self.vote_service.vote(key, request.direction)

        # Other votes may land between the write and this read
        if isinstance(key, CommentKey):
            votes = (await self.comment_service.get_comment(key)).votes
        else:
            votes = (await self.post_service.get_post(key)).votes

        return CastVoteResponse(
            votable_type=self.vote_service.votable_type(key),
            topic_id=key.topic_id,
            post_id=key.post_id,
            comment_id=request.comment_id,
            votes=votes,
        )
