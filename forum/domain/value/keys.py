"""Composite keys addressing forum entities.

A key holds an entity's own identity plus every ancestor identity. Keys are
the only addressing mechanism of the repositories: ``parts()`` lines up with
the key columns of the entity's table, so a parent key's parts are a prefix
of its children's parts.
"""

from pydantic import Field

from forum.domain.error import ValidationError
from forum.domain.value.common import ValueObject
from forum.domain.value.identifiers import CommentId, PostId, TopicId


class EntityKey(ValueObject):
    """Base class for composite keys."""

    def parts(self) -> tuple[str, ...]:
        """Key components ordered from the root of the hierarchy down."""
        return tuple(str(value) for value in self.model_dump().values())

    def __str__(self) -> str:
        return "/".join(self.parts())


class TopicKey(EntityKey):
    """Key of a topic: ``(topic_id,)``."""

    topic_id: TopicId = Field(min_length=1)


class PostKey(EntityKey):
    """Key of a post: ``(topic_id, post_id)``."""

    topic_id: TopicId = Field(min_length=1)
    post_id: PostId = Field(min_length=1)

    def parent(self) -> TopicKey:
        return TopicKey(topic_id=self.topic_id)


class CommentKey(EntityKey):
    """Key of a comment: ``(topic_id, post_id, comment_id)``."""

    topic_id: TopicId = Field(min_length=1)
    post_id: PostId = Field(min_length=1)
    comment_id: CommentId = Field(min_length=1)

    def parent(self) -> PostKey:
        return PostKey(topic_id=self.topic_id, post_id=self.post_id)


class ForumIds(ValueObject):
    """Identifiers as they arrive from the boundary.

    Route parameters are bound into this flat structure; each operation asks
    for the key it needs and gets a ValidationError if a component is missing.
    """

    topic_id: str | None = None
    post_id: str | None = None
    comment_id: str | None = None

    def topic_key(self) -> TopicKey:
        return TopicKey(topic_id=TopicId(self._require("topic_id")))

    def post_key(self) -> PostKey:
        return PostKey(
            topic_id=TopicId(self._require("topic_id")),
            post_id=PostId(self._require("post_id")),
        )

    def comment_key(self) -> CommentKey:
        return CommentKey(
            topic_id=TopicId(self._require("topic_id")),
            post_id=PostId(self._require("post_id")),
            comment_id=CommentId(self._require("comment_id")),
        )

    def _require(self, field: str) -> str:
        value = getattr(self, field)
        if not value:
            raise ValidationError(f"{field} is required")
        if "/" in value:
            raise ValidationError(f"{field} must not contain '/'")
        return value
