"""Post entity.

Posts live inside a topic and own a collection of comments. The comments are
not embedded: they are only present when a read asks to expand them.
"""

from typing import ClassVar, Optional

from pydantic import Field

from forum.domain.model.comment import Comment
from forum.domain.model.common import Entity, EntityPatch
from forum.domain.value import PostKey, TopicId, TopicKey


class Post(Entity):
    """Post entity.

    Composite key: ``(topic_id, id)``. The same post identity may exist
    under two different topics as two distinct rows.
    """

    resource: ClassVar[str] = "post"
    relations: ClassVar[dict[str, type[Entity]]] = {"comments": Comment}

    topic_id: TopicId = Field(min_length=1)
    title: str = Field(default="", max_length=300)
    content: str = Field(default="", max_length=10000)
    votes: int = 0
    comments: Optional[list[Comment]] = None  # Loaded on expansion only

    @property
    def key(self) -> PostKey:
        return PostKey(topic_id=self.topic_id, post_id=self.id)

    @property
    def parent_key(self) -> TopicKey:
        return self.key.parent()


class PostPatch(EntityPatch):
    """Editable post fields."""

    title: str = Field(default="", max_length=300)
    content: str = Field(default="", max_length=10000)
