"""Get replies use case."""

from uuid import UUID

from pydantic import BaseModel

from chatter.domain.service import ThreadService
from chatter.domain.value import CommentId
from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.comment.view import CommentView


class GetRepliesRequest(BaseModel):
    """Get replies request."""

    comment_id: str  # UUID string


class GetRepliesResponse(BaseModel):
    """Get replies response."""

    replies: list[CommentView]


class GetRepliesUseCase(BaseUseCase[GetRepliesRequest, GetRepliesResponse]):
    """Use case for listing the direct replies of a comment."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get replies use case.

        Args:
            thread_service: Thread read-side service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetRepliesRequest) -> GetRepliesResponse:
        """Execute get replies flow.

        Raises:
            ValueError: If the comment ID is not a valid UUID
        """
        replies = await self.thread_service.list_replies(
            CommentId(UUID(request.comment_id))
        )
        return GetRepliesResponse(
            replies=[CommentView.from_comment(reply) for reply in replies]
        )
