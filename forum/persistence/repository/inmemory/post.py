"""In-memory post repository for testing."""

from forum.domain.model import Post, PostPatch, Topic
from forum.domain.repository import PostRepository
from forum.domain.value import PostKey, TopicKey

from .base import InMemoryVotableRepository


class InMemoryPostRepository(
    InMemoryVotableRepository[Post, PostKey, TopicKey, PostPatch], PostRepository
):
    """In-memory implementation of PostRepository for testing."""

    entity_type = Post
    parent_type = Topic
