"""Strongly typed identifiers for Chatter domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
CommentId = NewType("CommentId", UUID)

# Opaque identifier of the page a thread is attached to (URL slug, article id...)
PageId = NewType("PageId", str)


def page_id_of(raw: str) -> PageId:
    """Canonical form of a page identifier (surrounding whitespace removed)."""
    return PageId(raw.strip())
