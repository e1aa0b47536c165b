"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel

from chatter.domain.repository import Transaction
from chatter.domain.service import CommentService, NotificationService, UserService
from chatter.domain.value import CommentId, UserId
from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.comment.view import CommentView


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    page_id: str
    content: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    message: str
    comment: CommentView


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CreateCommentResponse]):
    """Use case for commenting on a page or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        user_service: UserService,
        notification_service: NotificationService,
        transaction: Transaction,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            user_service: User domain service
            notification_service: Notification fanout service
            transaction: Request transaction, committed before fanout
        """
        self.comment_service = comment_service
        self.user_service = user_service
        self.notification_service = notification_service
        self.transaction = transaction

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Load the author (for the current username)
        2. Create comment via comment service (validates parent if replying)
        3. Commit, then publish ``newComment`` to the page room

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            ValueError: If an ID is not a valid UUID
            ValidationError: If content or page ID is invalid
            NotFoundError: If the author or parent comment doesn't exist
        """
        author = await self.user_service.get_user(UserId(UUID(request.author_id)))
        parent_id = CommentId(UUID(request.parent_id)) if request.parent_id else None

        comment = await self.comment_service.create_comment(
            page_id=request.page_id,
            author_id=author.id,
            author_username=author.username,
            content=request.content,
            parent_id=parent_id,
        )

        await self.transaction.commit()
        await self.notification_service.comment_created(comment)

        return CreateCommentResponse(
            message="Comment created successfully",
            comment=CommentView.from_comment(comment),
        )
