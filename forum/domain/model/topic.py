"""Topic entity, the root of the forum hierarchy."""

from typing import ClassVar, Optional

from forum.domain.model.common import Entity, EntityPatch
from forum.domain.model.post import Post
from forum.domain.value import TopicKey


class Topic(Entity):
    """Topic entity.

    A topic carries nothing but its caller-chosen identity; its posts are
    loaded on demand.
    """

    resource: ClassVar[str] = "topic"
    relations: ClassVar[dict[str, type[Entity]]] = {"posts": Post}

    posts: Optional[list[Post]] = None  # Loaded on expansion only

    @property
    def key(self) -> TopicKey:
        return TopicKey(topic_id=self.id)


class TopicPatch(EntityPatch):
    """Topics have no editable fields; an update only re-reads the row."""

    pass
