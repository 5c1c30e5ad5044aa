"""Comment entity.

Comments are flat replies to a post. A comment's identity is unique within
its (topic, post) pair.
"""

from typing import ClassVar

from pydantic import Field

from forum.domain.model.common import Entity, EntityPatch
from forum.domain.value import CommentKey, PostId, PostKey, TopicId


class Comment(Entity):
    """Comment entity.

    Composite key: ``(topic_id, post_id, id)``.
    """

    resource: ClassVar[str] = "comment"

    topic_id: TopicId = Field(min_length=1)
    post_id: PostId = Field(min_length=1)
    content: str = Field(default="", max_length=10000)
    votes: int = 0

    @property
    def key(self) -> CommentKey:
        return CommentKey(
            topic_id=self.topic_id, post_id=self.post_id, comment_id=self.id
        )

    @property
    def parent_key(self) -> PostKey:
        return self.key.parent()


class CommentPatch(EntityPatch):
    """Editable comment fields."""

    content: str = Field(default="", max_length=10000)
