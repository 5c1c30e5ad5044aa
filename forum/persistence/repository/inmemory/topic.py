"""In-memory topic repository for testing."""

from forum.domain.model import Topic, TopicPatch
from forum.domain.repository import TopicRepository
from forum.domain.value import TopicKey

from .base import InMemoryEntityRepository


class InMemoryTopicRepository(
    InMemoryEntityRepository[Topic, TopicKey, TopicKey, TopicPatch], TopicRepository
):
    """In-memory implementation of TopicRepository for testing."""

    entity_type = Topic
