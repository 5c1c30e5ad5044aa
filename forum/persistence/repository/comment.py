"""SQL implementation of Comment repository."""

from forum.domain.model import Comment, CommentPatch
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentKey, PostKey
from forum.persistence.registry import ENTITY_TABLES
from forum.persistence.repository.base import SqlVotableRepository


class SqlCommentRepository(
    SqlVotableRepository[Comment, CommentKey, PostKey, CommentPatch],
    CommentRepository,
):
    """SQL implementation of CommentRepository."""

    mapping = ENTITY_TABLES[Comment]
