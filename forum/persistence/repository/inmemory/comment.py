"""In-memory comment repository for testing."""

from forum.domain.model import Comment, CommentPatch, Post
from forum.domain.repository import CommentRepository
from forum.domain.value import CommentKey, PostKey

from .base import InMemoryVotableRepository


class InMemoryCommentRepository(
    InMemoryVotableRepository[Comment, CommentKey, PostKey, CommentPatch],
    CommentRepository,
):
    """In-memory implementation of CommentRepository for testing."""

    entity_type = Comment
    parent_type = Post
