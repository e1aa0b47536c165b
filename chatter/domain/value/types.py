"""Domain value objects for Chatter.

Enums name the closed sets the API exposes (reactions, sort orders,
broadcast events). Text values validate and normalise user input once, at
the boundary, and compare by value afterwards.
"""

import re
from enum import Enum

from pydantic import ConfigDict, RootModel, field_validator


class TextValue(RootModel[str]):
    """Validated, immutable string. ``str()`` gives the raw text."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.root


class ReactionKind(str, Enum):
    """Kind of reaction a user can toggle on a comment."""

    LIKE = "like"
    DISLIKE = "dislike"

    @property
    def opposite(self) -> "ReactionKind":
        """The reaction that is mutually exclusive with this one."""
        return ReactionKind.DISLIKE if self is ReactionKind.LIKE else ReactionKind.LIKE


class ReactionOutcome(str, Enum):
    """Result of a reaction toggle (observable, never persisted)."""

    ADDED = "added"
    REMOVED = "removed"


class SortMode(str, Enum):
    """Ordering of top-level comments on a page.

    Values match the ``sort`` query parameter accepted by the API.
    """

    NEWEST = "newest"
    MOST_LIKED = "mostLiked"
    MOST_DISLIKED = "mostDisliked"


class CommentEvent(str, Enum):
    """Events published to a page's broadcast room."""

    NEW_COMMENT = "newComment"
    UPDATE_COMMENT = "updateComment"
    DELETE_COMMENT = "deleteComment"
    LIKE_COMMENT = "likeComment"
    DISLIKE_COMMENT = "dislikeComment"


class Username(TextValue):
    """Public display name of a user.

    3-30 characters: letters, digits, underscore, hyphen and dot.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        v = v.strip()
        if not re.match(r"^[A-Za-z0-9_.-]{3,30}$", v):
            raise ValueError(
                "Username must be 3-30 characters: letters, digits, '_', '-' or '.'"
            )
        return v


class Email(TextValue):
    """Email address, normalised to lower case."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email format."""
        v = v.strip().lower()
        if len(v) > 254 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v
