"""Test configuration and helpers."""

from datetime import datetime
from uuid import uuid4

from chatter.domain.model.comment import Comment
from chatter.domain.value import CommentId, PageId, UserId
from chatter.domain.value.types import Username


def make_comment(
    page_id: str = "page-1",
    content: str = "Test comment",
    author_id: UserId | None = None,
    author_username: str = "author",
    parent_id: CommentId | None = None,
    created_at: datetime | None = None,
    **overrides,
) -> Comment:
    """Helper to build a comment for seeding repositories directly.

    Args:
        page_id: Page the comment belongs to
        content: Comment text
        author_id: Author (random when omitted)
        author_username: Author username
        parent_id: Parent comment for replies
        created_at: Creation time (now when omitted)
        **overrides: Any other Comment field

    Returns:
        Comment instance (not saved)
    """
    created_at = created_at or datetime.now()
    fields = {
        "id": CommentId(uuid4()),
        "page_id": PageId(page_id),
        "author_id": author_id or UserId(uuid4()),
        "author_username": Username(author_username),
        "content": content,
        "parent_id": parent_id,
        "created_at": created_at,
        "updated_at": created_at,
    }
    fields.update(overrides)
    return Comment(**fields)


def bearer(token: str) -> dict[str, str]:
    """Authorization header for a bearer token."""
    return {"Authorization": f"Bearer {token}"}
