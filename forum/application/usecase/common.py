"""Response views shared by the use cases.

Views are the serialised shape of an entity. Expanded collections are
``None`` when they were not requested, so "not loaded" and "no children"
stay distinguishable in responses.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from forum.domain.model import Comment, Post, Topic


class CommentView(BaseModel):
    """Serialised comment."""

    id: str
    topic_id: str
    post_id: str
    content: str
    votes: int
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, comment: Comment):
        return cls(
            id=comment.id,
            topic_id=comment.topic_id,
            post_id=comment.post_id,
            content=comment.content,
            votes=comment.votes,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
            deleted_at=comment.deleted_at,
        )


class PostView(BaseModel):
    """Serialised post, with comments when they were expanded."""

    id: str
    topic_id: str
    title: str
    content: str
    votes: int
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
    comments: Optional[list[CommentView]] = None

    @classmethod
    def from_entity(cls, post: Post):
        comments = None
        if post.comments is not None:
            comments = [CommentView.from_entity(c) for c in post.comments]
        return cls(
            id=post.id,
            topic_id=post.topic_id,
            title=post.title,
            content=post.content,
            votes=post.votes,
            created_at=post.created_at,
            updated_at=post.updated_at,
            deleted_at=post.deleted_at,
            comments=comments,
        )


class TopicView(BaseModel):
    """Serialised topic, with posts when they were expanded."""

    id: str
    created_at: datetime
    updated_at: datetime
    deleted_at: Optional[datetime] = None
    posts: Optional[list[PostView]] = None

    @classmethod
    def from_entity(cls, topic: Topic):
        posts = None
        if topic.posts is not None:
            posts = [PostView.from_entity(p) for p in topic.posts]
        return cls(
            id=topic.id,
            created_at=topic.created_at,
            updated_at=topic.updated_at,
            deleted_at=topic.deleted_at,
            posts=posts,
        )
