"""Login use case."""

from pydantic import BaseModel

from chatter.domain.service import JWTService, UserService
from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.auth.common import AuthResponse, UserInfo


class LoginRequest(BaseModel):
    """Email and password login request."""

    email: str
    password: str


class LoginUseCase(BaseUseCase[LoginRequest, AuthResponse]):
    """Use case for email and password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Args:
            request: Login credentials

        Returns:
            Bearer token and the authenticated user

        Raises:
            AuthenticationError: If the credentials are invalid
        """
        user = await self.user_service.authenticate(request.email, request.password)
        return AuthResponse(
            message="Login successful",
            token=self.jwt_service.create_token(user),
            user=UserInfo.from_user(user),
        )
