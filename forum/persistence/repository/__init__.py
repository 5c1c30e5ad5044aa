"""SQL repository implementations."""

from forum.persistence.repository.comment import SqlCommentRepository
from forum.persistence.repository.post import SqlPostRepository
from forum.persistence.repository.topic import SqlTopicRepository

__all__ = [
    "SqlTopicRepository",
    "SqlPostRepository",
    "SqlCommentRepository",
]
