"""Domain value types for the forum."""

from enum import Enum


class VoteDirection(str, Enum):
    """Direction of a vote.

    Each vote moves the counter by exactly one.
    """

    UP = "up"
    DOWN = "down"

    @property
    def delta(self) -> int:
        """Amount added to the votes counter."""
        return 1 if self is VoteDirection.UP else -1


class VotableType(str, Enum):
    """Type of entity that can be voted on."""

    POST = "post"
    COMMENT = "comment"
