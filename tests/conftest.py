"""Test configuration and fixtures."""

import logfire

from forum.domain.model import Comment, Post, Topic

# Spans and logs stay in-process during tests
logfire.configure(send_to_logfire=False, console=False)


def make_topic(topic_id: str = "science") -> Topic:
    """Helper to build a topic."""
    return Topic(id=topic_id)


def make_post(
    topic_id: str = "science",
    post_id: str = "p1",
    title: str = "Title",
    content: str = "Body",
) -> Post:
    """Helper to build a post."""
    return Post(id=post_id, topic_id=topic_id, title=title, content=content)


def make_comment(
    topic_id: str = "science",
    post_id: str = "p1",
    comment_id: str = "c1",
    content: str = "Nice post",
) -> Comment:
    """Helper to build a comment."""
    return Comment(id=comment_id, topic_id=topic_id, post_id=post_id, content=content)
