"""Domain value objects for the forum."""

from forum.domain.value.identifiers import CommentId, PostId, TopicId
from forum.domain.value.keys import (
    CommentKey,
    EntityKey,
    ForumIds,
    PostKey,
    TopicKey,
)
from forum.domain.value.types import VotableType, VoteDirection

__all__ = [
    # Identifiers
    "TopicId",
    "PostId",
    "CommentId",
    # Keys
    "EntityKey",
    "TopicKey",
    "PostKey",
    "CommentKey",
    "ForumIds",
    # Types
    "VotableType",
    "VoteDirection",
]
