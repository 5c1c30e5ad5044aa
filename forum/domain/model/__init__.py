"""Domain model entities for the forum."""

from forum.domain.model.comment import Comment, CommentPatch
from forum.domain.model.common import DomainModel, Entity, EntityPatch, ExpansionPlan
from forum.domain.model.post import Post, PostPatch
from forum.domain.model.topic import Topic, TopicPatch

__all__ = [
    "DomainModel",
    "Entity",
    "EntityPatch",
    "ExpansionPlan",
    "Topic",
    "TopicPatch",
    "Post",
    "PostPatch",
    "Comment",
    "CommentPatch",
]
