"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .post_service import PostService
from .topic_service import TopicService
from .vote_service import VotableKey, VoteService

__all__ = [
    "CommentService",
    "PostService",
    "Service",
    "TopicService",
    "VotableKey",
    "VoteService",
]
