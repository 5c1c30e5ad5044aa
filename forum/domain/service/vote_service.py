"""Vote domain service."""

from typing import Union

import logfire

from forum.domain.repository import CommentRepository, PostRepository
from forum.domain.value import CommentKey, PostKey, VotableType, VoteDirection

from .base import Service

VotableKey = Union[PostKey, CommentKey]


class VoteService(Service):
    """Domain service for vote operations.

    Votes are anonymous counter moves: each call changes the counter by one
    and nothing records who voted.
    """

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def upvote(self, key: VotableKey) -> None:
        """Add one vote to a post or comment.

        Raises:
            NotFoundError: If no live entity matches the key
        """
        await self.vote(key, VoteDirection.UP)

    async def downvote(self, key: VotableKey) -> None:
        """Remove one vote from a post or comment.

        Raises:
            NotFoundError: If no live entity matches the key
        """
        await self.vote(key, VoteDirection.DOWN)

    async def vote(self, key: VotableKey, direction: VoteDirection) -> None:
        """Apply a vote to the entity addressed by ``key``.

        The repository is chosen from the key type; the counter change itself
        is a single atomic write in storage.
        """
        votable_type = self.votable_type(key)
        with logfire.span(
            "vote_service.vote",
            votable_type=votable_type.value,
            key=str(key),
            direction=direction.value,
        ):
            if votable_type is VotableType.COMMENT:
                await self.comment_repository.vote(key, direction.delta)
            else:
                await self.post_repository.vote(key, direction.delta)
            logfire.info(
                "Vote recorded",
                votable_type=votable_type.value,
                key=str(key),
                direction=direction.value,
            )

    @staticmethod
    def votable_type(key: VotableKey) -> VotableType:
        if isinstance(key, CommentKey):
            return VotableType.COMMENT
        return VotableType.POST
