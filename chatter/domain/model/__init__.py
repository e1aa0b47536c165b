"""Domain model entities for Chatter."""

from chatter.domain.model.comment import Comment
from chatter.domain.model.user import User

__all__ = [
    "User",
    "Comment",
]
