"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from chatter.config import CommentSettings
from chatter.domain.error import AuthorizationError, NotFoundError, ValidationError
from chatter.domain.model.comment import MAX_PAGE_ID_LENGTH, Comment
from chatter.domain.repository import CommentRepository
from chatter.domain.value import CommentId, PageId, UserId, page_id_of
from chatter.domain.value.types import Username

from .base import Service


class CommentService(Service):
    """Domain service for comment creation, editing and soft deletion.

    Owns the thread invariants: replies only attach to visible parents on the
    same page, only authors edit or delete, and soft deletion never cascades.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            comment_settings: Comment limits
        """
        self.comment_repository = comment_repository
        self.comment_settings = comment_settings

    def _validate_content(self, content: str) -> str:
        content = content.strip()
        max_length = self.comment_settings.max_content_length
        if not content:
            raise ValidationError("Comment content is required")
        if len(content) > max_length:
            raise ValidationError(
                f"Comment must be between 1 and {max_length} characters"
            )
        return content

    @staticmethod
    def _validate_page_id(page_id: str) -> PageId:
        page_id = page_id_of(page_id)
        if not page_id:
            raise ValidationError("Page ID is required")
        if len(page_id) > MAX_PAGE_ID_LENGTH:
            raise ValidationError(
                f"Page ID must be between 1 and {MAX_PAGE_ID_LENGTH} characters"
            )
        return page_id

    async def create_comment(
        self,
        page_id: str,
        author_id: UserId,
        author_username: Username,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        Args:
            page_id: Page the comment is attached to
            author_id: Author user ID
            author_username: Author username (denormalised for display)
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Created comment

        Raises:
            ValidationError: If content or page ID is invalid, or the parent
                is on another page
            NotFoundError: If the parent doesn't exist or is deleted
        """
        with logfire.span(
            "comment_service.create_comment",
            page_id=page_id,
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            valid_page_id = self._validate_page_id(page_id)
            valid_content = self._validate_content(content)

            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.is_deleted:
                    logfire.warn(
                        "Parent comment not found",
                        parent_id=str(parent_id),
                        page_id=valid_page_id,
                    )
                    raise NotFoundError("Parent comment", str(parent_id))
                if parent.page_id != valid_page_id:
                    logfire.warn(
                        "Parent comment belongs to another page",
                        parent_id=str(parent_id),
                        parent_page_id=parent.page_id,
                        target_page_id=valid_page_id,
                    )
                    raise ValidationError(
                        "Parent comment does not belong to this page"
                    )

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                page_id=valid_page_id,
                author_id=author_id,
                author_username=author_username,
                content=valid_content,
                parent_id=parent_id,
                created_at=now,
                updated_at=now,
            )
            saved = await self.comment_repository.save(comment)

            # Back-link maintenance is a separate, idempotent single-row update
            if parent_id:
                await self.comment_repository.add_reply(parent_id, saved.id)

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                page_id=valid_page_id,
                is_reply=saved.is_reply,
            )
            return saved

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a visible comment.

        Args:
            comment_id: Comment ID

        Returns:
            The comment

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None or comment.is_deleted:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def _get_owned_comment(
        self, comment_id: CommentId, requester_id: UserId
    ) -> Comment:
        comment = await self.get_comment(comment_id)
        if comment.author_id != requester_id:
            logfire.warn(
                "Comment modification by non-author",
                comment_id=str(comment_id),
                requester_id=str(requester_id),
            )
            raise AuthorizationError("comment", str(comment_id), str(requester_id))
        return comment

    async def edit_comment(
        self, comment_id: CommentId, requester_id: UserId, content: str
    ) -> Comment:
        """Replace the content of a comment.

        Reactions, parent and back-links are left untouched.

        Args:
            comment_id: Comment ID
            requester_id: User asking for the edit (must be the author)
            content: New content

        Returns:
            Updated comment

        Raises:
            NotFoundError: If the comment doesn't exist or is deleted
            AuthorizationError: If the requester is not the author
            ValidationError: If content is out of bounds
        """
        with logfire.span(
            "comment_service.edit_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            await self._get_owned_comment(comment_id, requester_id)
            valid_content = self._validate_content(content)

            updated = await self.comment_repository.update_content(
                comment_id, valid_content
            )
            if updated is None:
                # Deleted between the read and the write
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment content updated",
                comment_id=str(comment_id),
                content_length=len(valid_content),
            )
            return updated

    async def soft_delete(self, comment_id: CommentId, requester_id: UserId) -> Comment:
        """Mark a comment as deleted.

        The comment stays in its parent's back-link, keeps its reactions and
        remains a valid parent for existing replies.

        Args:
            comment_id: Comment ID
            requester_id: User asking for the deletion (must be the author)

        Returns:
            The deleted comment

        Raises:
            NotFoundError: If the comment doesn't exist or is already deleted
            AuthorizationError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.soft_delete",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            await self._get_owned_comment(comment_id, requester_id)

            deleted = await self.comment_repository.mark_deleted(comment_id)
            if deleted is None:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment soft-deleted",
                comment_id=str(comment_id),
                page_id=deleted.page_id,
            )
            return deleted

    async def rebuild_reply_index(self, comment_id: CommentId) -> Comment:
        """Recompute a comment's reply back-link from its children.

        Deleted children are kept, matching how the back-link is maintained
        on write.

        Args:
            comment_id: Comment ID

        Returns:
            Comment with a rebuilt back-link

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "comment_service.rebuild_reply_index", comment_id=str(comment_id)
        ):
            children = await self.comment_repository.find_children(
                comment_id, include_deleted=True
            )
            updated = await self.comment_repository.set_reply_ids(
                comment_id, [child.id for child in children]
            )
            if updated is None:
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Reply index rebuilt",
                comment_id=str(comment_id),
                replies_count=updated.replies_count,
            )
            return updated
