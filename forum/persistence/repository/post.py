"""SQL implementation of Post repository."""

from forum.domain.model import Post, PostPatch
from forum.domain.repository import PostRepository
from forum.domain.value import PostKey, TopicKey
from forum.persistence.registry import ENTITY_TABLES
from forum.persistence.repository.base import SqlVotableRepository


class SqlPostRepository(
    SqlVotableRepository[Post, PostKey, TopicKey, PostPatch], PostRepository
):
    """SQL implementation of PostRepository.

    Posts are scoped by topic: ``list`` with a topic key returns only that
    topic's live posts.
    """

    mapping = ENTITY_TABLES[Post]
