"""In-memory repository implementations for testing."""

from .base import InMemoryDatabase
from .comment import InMemoryCommentRepository
from .post import InMemoryPostRepository
from .topic import InMemoryTopicRepository

__all__ = [
    "InMemoryDatabase",
    "InMemoryTopicRepository",
    "InMemoryPostRepository",
    "InMemoryCommentRepository",
]
