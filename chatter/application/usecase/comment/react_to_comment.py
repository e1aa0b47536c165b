"""React to comment use case."""

from uuid import UUID

from pydantic import BaseModel

from chatter.domain.repository import Transaction
from chatter.domain.service import NotificationService, ReactionService
from chatter.domain.value import CommentId, ReactionKind, ReactionOutcome, UserId
from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.comment.view import CommentView


class ReactToCommentRequest(BaseModel):
    """Like or dislike toggle request."""

    comment_id: str  # UUID string
    user_id: str  # Reacting user ID
    kind: ReactionKind


class ReactToCommentResponse(BaseModel):
    """Like or dislike toggle response."""

    message: str
    outcome: ReactionOutcome
    comment: CommentView


class ReactToCommentUseCase(BaseUseCase[ReactToCommentRequest, ReactToCommentResponse]):
    """Use case for toggling a like or dislike on a comment."""

    def __init__(
        self,
        reaction_service: ReactionService,
        notification_service: NotificationService,
        transaction: Transaction,
    ) -> None:
        """Initialize react to comment use case.

        Args:
            reaction_service: Reaction domain service
            notification_service: Notification fanout service
            transaction: Request transaction, committed before fanout
        """
        self.reaction_service = reaction_service
        self.notification_service = notification_service
        self.transaction = transaction

    async def execute(self, request: ReactToCommentRequest) -> ReactToCommentResponse:
        """Execute reaction toggle flow.

        Reacting again with the same kind removes the reaction; reacting with
        the opposite kind switches it.

        Args:
            request: Reaction request

        Returns:
            Updated comment and a message describing the outcome

        Raises:
            ValueError: If an ID is not a valid UUID
            NotFoundError: If the comment doesn't exist or is deleted
        """
        result = await self.reaction_service.react(
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
            kind=request.kind,
        )

        await self.transaction.commit()
        await self.notification_service.comment_reacted(result.comment, result.kind)

        return ReactToCommentResponse(
            message=result.message,
            outcome=result.outcome,
            comment=CommentView.from_comment(result.comment),
        )
