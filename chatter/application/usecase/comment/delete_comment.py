"""Delete comment use case."""

from uuid import UUID

from pydantic import BaseModel

from chatter.domain.repository import Transaction
from chatter.domain.service import CommentService, NotificationService
from chatter.domain.value import CommentId, UserId
from chatter.application.usecase.base import BaseUseCase


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    message: str
    comment_id: str


class DeleteCommentUseCase(BaseUseCase[DeleteCommentRequest, DeleteCommentResponse]):
    """Use case for soft-deleting a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        notification_service: NotificationService,
        transaction: Transaction,
    ) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
            notification_service: Notification fanout service
            transaction: Request transaction, committed before fanout
        """
        self.comment_service = comment_service
        self.notification_service = notification_service
        self.transaction = transaction

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Replies of the deleted comment are left in place.

        Args:
            request: Delete comment request

        Returns:
            Confirmation with the deleted comment ID

        Raises:
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the comment doesn't exist or is already deleted
            AuthorizationError: If the user doesn't own the comment
        """
        comment = await self.comment_service.soft_delete(
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=UserId(UUID(request.user_id)),
        )

        await self.transaction.commit()
        await self.notification_service.comment_deleted(comment.page_id, comment.id)

        return DeleteCommentResponse(
            message="Comment deleted successfully",
            comment_id=str(comment.id),
        )
