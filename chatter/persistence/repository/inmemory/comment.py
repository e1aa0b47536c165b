"""In-memory comment repository for testing."""

from typing import Optional

from chatter.domain.model.comment import Comment
from chatter.domain.repository.comment import CommentRepository
from chatter.domain.value import (
    CommentId,
    PageId,
    ReactionKind,
    ReactionOutcome,
    SortMode,
    UserId,
)


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Mutations never await between reading and writing a comment, which makes
    each of them atomic on the event loop.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    def _visible_top_level(self, page_id: PageId) -> list[Comment]:
        return [
            c
            for c in self._comments.values()
            if c.page_id == page_id and not c.is_deleted and c.parent_id is None
        ]

    async def find_top_level(
        self,
        page_id: PageId,
        sort: SortMode,
        limit: int,
        offset: int,
    ) -> list[Comment]:
        """Find visible top-level comments of a page, sorted and sliced."""
        comments = self._visible_top_level(page_id)

        if sort == SortMode.MOST_LIKED:
            key = lambda c: (c.likes_count, c.created_at, c.id)  # noqa: E731
        elif sort == SortMode.MOST_DISLIKED:
            key = lambda c: (c.dislikes_count, c.created_at, c.id)  # noqa: E731
        else:
            key = lambda c: (c.created_at, c.id)  # noqa: E731
        comments.sort(key=key, reverse=True)

        return comments[offset : offset + limit]

    async def count_top_level(self, page_id: PageId) -> int:
        """Count visible top-level comments of a page."""
        return len(self._visible_top_level(page_id))

    async def find_children(
        self,
        parent_id: CommentId,
        include_deleted: bool = False,
    ) -> list[Comment]:
        """Find direct replies of a comment, oldest first."""
        comments = [c for c in self._comments.values() if c.parent_id == parent_id]

        if not include_deleted:
            comments = [c for c in comments if not c.is_deleted]

        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def save(self, comment: Comment) -> Comment:
        """Save or replace a comment."""
        self._comments[comment.id] = comment
        return comment

    async def add_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        """Append ``reply_id`` to the parent's back-link unless present."""
        parent = self._comments.get(parent_id)
        if parent:
            self._comments[parent_id] = parent.with_reply(reply_id)

    async def set_reply_ids(
        self, comment_id: CommentId, reply_ids: list[CommentId]
    ) -> Optional[Comment]:
        """Overwrite the back-link of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update={"reply_ids": list(reply_ids)})
        self._comments[comment_id] = updated
        return updated

    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a non-deleted comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        updated = comment.touched(content=content)
        self._comments[comment_id] = updated
        return updated

    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Soft-delete a non-deleted comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        updated = comment.touched(is_deleted=True)
        self._comments[comment_id] = updated
        return updated

    async def toggle_reaction(
        self,
        comment_id: CommentId,
        user_id: UserId,
        kind: ReactionKind,
    ) -> Optional[tuple[Comment, ReactionOutcome]]:
        """Toggle a reaction against the currently stored comment."""
        comment = self._comments.get(comment_id)
        if comment is None or comment.is_deleted:
            return None
        updated, outcome = comment.with_reaction_toggled(user_id, kind)
        self._comments[comment_id] = updated
        return updated, outcome
