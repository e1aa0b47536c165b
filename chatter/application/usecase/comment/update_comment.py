"""Update comment use case."""

from uuid import UUID

from pydantic import BaseModel

from chatter.domain.repository import Transaction
from chatter.domain.service import CommentService, NotificationService
from chatter.domain.value import CommentId, UserId
from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.comment.view import CommentView


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str  # Current user ID (must be author)
    content: str


class UpdateCommentResponse(BaseModel):
    """Update comment response."""

    message: str
    comment: CommentView


class UpdateCommentUseCase(BaseUseCase[UpdateCommentRequest, UpdateCommentResponse]):
    """Use case for editing a comment's content."""

    def __init__(
        self,
        comment_service: CommentService,
        notification_service: NotificationService,
        transaction: Transaction,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            notification_service: Notification fanout service
            transaction: Request transaction, committed before fanout
        """
        self.comment_service = comment_service
        self.notification_service = notification_service
        self.transaction = transaction

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request

        Returns:
            Updated comment

        Raises:
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the comment doesn't exist or is deleted
            AuthorizationError: If the user doesn't own the comment
            ValidationError: If the new content is out of bounds
        """
        comment = await self.comment_service.edit_comment(
            comment_id=CommentId(UUID(request.comment_id)),
            requester_id=UserId(UUID(request.user_id)),
            content=request.content,
        )

        await self.transaction.commit()
        await self.notification_service.comment_updated(comment)

        return UpdateCommentResponse(
            message="Comment updated successfully",
            comment=CommentView.from_comment(comment),
        )
