"""Domain value objects for Chatter."""

from chatter.domain.value.identifiers import (
    CommentId,
    PageId,
    UserId,
    page_id_of,
)
from chatter.domain.value.types import (
    CommentEvent,
    Email,
    ReactionKind,
    ReactionOutcome,
    SortMode,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "CommentId",
    "PageId",
    "page_id_of",
    # Types
    "CommentEvent",
    "Email",
    "ReactionKind",
    "ReactionOutcome",
    "SortMode",
    "Username",
]
