"""Repository interfaces for the forum domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from forum.domain.repository.base import EntityRepository, VotableRepository
from forum.domain.repository.comment import CommentRepository
from forum.domain.repository.post import PostRepository
from forum.domain.repository.topic import TopicRepository

__all__ = [
    "EntityRepository",
    "VotableRepository",
    "TopicRepository",
    "PostRepository",
    "CommentRepository",
]
