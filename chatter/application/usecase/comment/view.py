"""Comment representation shared by comment use cases."""

from datetime import datetime

from pydantic import BaseModel

from chatter.domain.model.comment import Comment
from chatter.domain.service.notification_service import comment_payload


class AuthorView(BaseModel):
    """Public author of a comment."""

    id: str
    username: str


class CommentView(BaseModel):
    """Comment as returned to API clients and page viewers."""

    id: str
    page_id: str
    author: AuthorView
    content: str
    parent_id: str | None
    likes: list[str]
    dislikes: list[str]
    reply_ids: list[str]
    likes_count: int
    dislikes_count: int
    replies_count: int
    is_deleted: bool
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentView":
        """Build the view from the same payload broadcast to page rooms."""
        return cls.model_validate(comment_payload(comment))
