"""Register use case."""

from pydantic import BaseModel

from chatter.domain.service import JWTService, UserService
from chatter.application.usecase.base import BaseUseCase
from chatter.application.usecase.auth.common import AuthResponse, UserInfo


class RegisterRequest(BaseModel):
    """Registration request."""

    username: str
    email: str
    password: str


class RegisterUseCase(BaseUseCase[RegisterRequest, AuthResponse]):
    """Use case for creating an account and signing it in."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Args:
            request: Username, email and password

        Returns:
            Bearer token and the new user

        Raises:
            ValidationError: If any field is malformed
            ConflictError: If the email or username is already taken
        """
        user = await self.user_service.register(
            username=request.username,
            email=request.email,
            password=request.password,
        )
        return AuthResponse(
            message="User registered successfully",
            token=self.jwt_service.create_token(user),
            user=UserInfo.from_user(user),
        )
