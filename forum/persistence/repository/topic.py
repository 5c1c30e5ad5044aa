"""SQL implementation of Topic repository."""

from forum.domain.model import Topic, TopicPatch
from forum.domain.repository import TopicRepository
from forum.domain.value import TopicKey
from forum.persistence.registry import ENTITY_TABLES
from forum.persistence.repository.base import SqlEntityRepository


class SqlTopicRepository(
    SqlEntityRepository[Topic, TopicKey, TopicKey, TopicPatch], TopicRepository
):
    """SQL implementation of TopicRepository."""

    mapping = ENTITY_TABLES[Topic]
