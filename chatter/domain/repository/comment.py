"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from chatter.domain.model.comment import Comment
from chatter.domain.value import (
    CommentId,
    PageId,
    ReactionKind,
    ReactionOutcome,
    SortMode,
    UserId,
)


class CommentRepository(ABC):
    """Repository for Comment entity.

    Every mutating method touches exactly one comment and must be applied
    atomically by the implementation (single statement / single document
    update). No method spans several comments.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, including soft-deleted ones.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level(
        self,
        page_id: PageId,
        sort: SortMode,
        limit: int,
        offset: int,
    ) -> List[Comment]:
        """Find visible top-level comments of a page, sorted and sliced.

        Args:
            page_id: The page identifier
            sort: Ordering to apply before slicing
            limit: Maximum number of comments to return
            offset: Number of comments to skip

        Returns:
            List of non-deleted comments with no parent
        """
        pass

    @abstractmethod
    async def count_top_level(self, page_id: PageId) -> int:
        """Count visible top-level comments of a page.

        Args:
            page_id: The page identifier

        Returns:
            Number of non-deleted comments with no parent
        """
        pass

    @abstractmethod
    async def find_children(
        self,
        parent_id: CommentId,
        include_deleted: bool = False,
    ) -> List[Comment]:
        """Find direct replies of a comment, oldest first.

        Args:
            parent_id: The parent comment ID
            include_deleted: Whether to include soft-deleted comments

        Returns:
            List of child comments ordered by creation time ascending
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or replace).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def add_reply(self, parent_id: CommentId, reply_id: CommentId) -> None:
        """Add ``reply_id`` to the parent's back-link if not already present.

        Must be idempotent: calling it twice leaves a single entry.

        Args:
            parent_id: The parent comment ID
            reply_id: The reply comment ID
        """
        pass

    @abstractmethod
    async def set_reply_ids(
        self, comment_id: CommentId, reply_ids: List[CommentId]
    ) -> Optional[Comment]:
        """Overwrite the back-link of a comment.

        Args:
            comment_id: The comment ID
            reply_ids: Complete ordered list of reply IDs

        Returns:
            Updated comment, None if it doesn't exist
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str
    ) -> Optional[Comment]:
        """Replace the content of a non-deleted comment and bump updated_at.

        Args:
            comment_id: The comment ID
            content: New content

        Returns:
            Updated comment, None if it doesn't exist or is deleted
        """
        pass

    @abstractmethod
    async def mark_deleted(self, comment_id: CommentId) -> Optional[Comment]:
        """Soft-delete a non-deleted comment.

        Args:
            comment_id: The comment ID

        Returns:
            Updated comment, None if it doesn't exist or is already deleted
        """
        pass

    @abstractmethod
    async def toggle_reaction(
        self,
        comment_id: CommentId,
        user_id: UserId,
        kind: ReactionKind,
    ) -> Optional[tuple[Comment, ReactionOutcome]]:
        """Atomically toggle a user's reaction on a non-deleted comment.

        Membership must be evaluated against the stored state inside the same
        atomic update that writes the result.

        Args:
            comment_id: The comment ID
            user_id: Reacting user
            kind: Reaction to toggle

        Returns:
            Tuple of (updated comment, outcome), None if the comment doesn't
            exist or is deleted
        """
        pass
