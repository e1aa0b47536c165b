"""Get current user use case."""

from uuid import UUID

from pydantic import BaseModel

from chatter.domain.service import UserService
from chatter.domain.value import UserId
from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.auth.common import UserInfo


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: str  # User ID from a verified token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user: UserInfo


class GetCurrentUserUseCase(BaseUseCase[GetCurrentUserRequest, GetCurrentUserResponse]):
    """Use case for getting the current authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            ValueError: If the user ID is not a valid UUID
            NotFoundError: If the user no longer exists
        """
        user = await self.user_service.get_user(UserId(UUID(request.user_id)))
        return GetCurrentUserResponse(user=UserInfo.from_user(user))
