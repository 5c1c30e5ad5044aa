"""Topic repository interface."""

from forum.domain.model import Topic, TopicPatch
from forum.domain.repository.base import EntityRepository
from forum.domain.value import TopicKey


class TopicRepository(EntityRepository[Topic, TopicKey, TopicKey, TopicPatch]):
    """Repository for topics.

    Topics sit at the root of the hierarchy, so ``list`` takes no scope.
    """

    pass
