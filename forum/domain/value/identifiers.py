"""Strongly typed identifiers for forum entities.

Identities are plain strings: topic identities are chosen by the caller,
post and comment identities are generated UUID strings.
"""

from typing import NewType

TopicId = NewType("TopicId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
