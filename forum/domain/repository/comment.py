"""Comment repository interface."""

from forum.domain.model import Comment, CommentPatch
from forum.domain.repository.base import VotableRepository
from forum.domain.value import CommentKey, PostKey


class CommentRepository(
    VotableRepository[Comment, CommentKey, PostKey, CommentPatch]
):
    """Repository for comments, scoped by (topic, post)."""

    pass
