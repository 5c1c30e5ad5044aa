"""Post repository interface."""

from forum.domain.model import Post, PostPatch
from forum.domain.repository.base import VotableRepository
from forum.domain.value import PostKey, TopicKey


class PostRepository(VotableRepository[Post, PostKey, TopicKey, PostPatch]):
    """Repository for posts, scoped by topic."""

    pass
