"""Comment domain service."""

from uuid import uuid4

import logfire

from forum.domain.model import Comment, CommentPatch
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentId, CommentKey, PostKey

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def create_comment(self, post_key: PostKey, content: str) -> Comment:
        """Create a comment on a post.

        Args:
            post_key: Key of the post being commented on
            content: Comment text

        Returns:
            Created comment

        Raises:
            NotFoundError: If the post is missing, deleted, or not in that topic
        """
        with logfire.span("comment_service.create_comment", post_key=str(post_key)):
            comment = Comment(
                id=CommentId(str(uuid4())),
                topic_id=post_key.topic_id,
                post_id=post_key.post_id,
                content=content,
            )
            saved = await self.comment_repository.create(comment)
            logfire.info("Comment created", comment_key=str(saved.key))
            return saved

    async def get_comment(self, key: CommentKey) -> Comment:
        with logfire.span("comment_service.get_comment", comment_key=str(key)):
            return await self.comment_repository.get(key)

    async def list_comments(self, post_key: PostKey) -> list[Comment]:
        """List the live comments of a post, oldest first."""
        with logfire.span("comment_service.list_comments", post_key=str(post_key)):
            comments = await self.comment_repository.list(post_key)
            logfire.info(
                "Comments listed", post_key=str(post_key), count=len(comments)
            )
            return comments

    async def update_comment(self, key: CommentKey, patch: CommentPatch) -> Comment:
        with logfire.span("comment_service.update_comment", comment_key=str(key)):
            comment = await self.comment_repository.update(key, patch)
            logfire.info("Comment updated", comment_key=str(key))
            return comment

    async def delete_comment(self, key: CommentKey) -> Comment:
        with logfire.span("comment_service.delete_comment", comment_key=str(key)):
            comment = await self.comment_repository.delete(key)
            logfire.info("Comment deleted", comment_key=str(key))
            return comment
