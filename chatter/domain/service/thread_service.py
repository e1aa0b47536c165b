"""Thread read-side domain service."""

import math

import logfire
from pydantic import BaseModel

from chatter.config import CommentSettings
from chatter.domain.error import ValidationError
from chatter.domain.model.comment import Comment
from chatter.domain.repository import CommentRepository
from chatter.domain.value import CommentId, PageId, SortMode, page_id_of

from .base import Service


class ThreadPage(BaseModel):
    """One page of top-level comments."""

    items: list[Comment]
    total: int
    page: int
    page_size: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.page_size) if self.total else 0


class ThreadService(Service):
    """Domain service assembling comment threads for display."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            comment_settings: Paging limits
        """
        self.comment_repository = comment_repository
        self.comment_settings = comment_settings

    async def list_top_level(
        self,
        page_id: PageId,
        page: int = 1,
        page_size: int | None = None,
        sort: SortMode = SortMode.NEWEST,
    ) -> ThreadPage:
        """List visible top-level comments of a page.

        Sorting:
        - NEWEST: creation time descending
        - MOST_LIKED: like count descending, then newest first
        - MOST_DISLIKED: dislike count descending, then newest first

        Asking for a page past the end returns no items but the real total.

        Args:
            page_id: Page identifier
            page: 1-indexed page number
            page_size: Items per page (defaults to settings)
            sort: Sort mode

        Returns:
            Requested slice and total number of top-level comments

        Raises:
            ValidationError: If page or page_size is out of range
        """
        page_id = page_id_of(page_id)
        if page_size is None:
            page_size = self.comment_settings.default_page_size
        max_page_size = self.comment_settings.max_page_size

        if page < 1:
            raise ValidationError("Page must be a positive integer")
        if not 1 <= page_size <= max_page_size:
            raise ValidationError(f"Limit must be between 1 and {max_page_size}")

        with logfire.span(
            "thread_service.list_top_level",
            page_id=page_id,
            page=page,
            page_size=page_size,
            sort=sort.value,
        ):
            total = await self.comment_repository.count_top_level(page_id)
            items = await self.comment_repository.find_top_level(
                page_id=page_id,
                sort=sort,
                limit=page_size,
                offset=(page - 1) * page_size,
            )
            logfire.info(
                "Top-level comments retrieved",
                page_id=page_id,
                count=len(items),
                total=total,
            )
            return ThreadPage(items=items, total=total, page=page, page_size=page_size)

    async def list_replies(self, comment_id: CommentId) -> list[Comment]:
        """List visible direct replies of a comment, oldest first.

        Replies are not paginated. The parent itself may be deleted; its
        replies are still listed.

        Args:
            comment_id: Parent comment ID

        Returns:
            Replies in creation order (empty for an unknown parent)
        """
        with logfire.span(
            "thread_service.list_replies", comment_id=str(comment_id)
        ):
            replies = await self.comment_repository.find_children(
                comment_id, include_deleted=False
            )
            logfire.info(
                "Replies retrieved", comment_id=str(comment_id), count=len(replies)
            )
            return replies
