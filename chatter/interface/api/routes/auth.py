"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from chatter.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from chatter.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from chatter.domain.service import JWTService
from chatter.interface.api.security import require_identity

router = APIRouter(prefix="/api/auth", tags=["authentication"], route_class=DishkaRoute)


@router.post(
    "/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> AuthResponse:
    """Register a new account.

    Args:
        request: Username, email and password
        register_use_case: Register use case from DI

    Returns:
        Bearer token and the new user

    Raises:
        HTTPException: 400 on malformed input, 409 if email or username is taken
    """
    try:
        return await register_use_case.execute(request)
    except ConflictError as e:
        logfire.info("Registration conflict", field=e.field)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    login_use_case: FromDishka[LoginUseCase],
) -> AuthResponse:
    """Log in with email and password.

    Args:
        request: Login credentials
        login_use_case: Login use case from DI

    Returns:
        Bearer token and the authenticated user

    Raises:
        HTTPException: 401 if the credentials are invalid
    """
    try:
        return await login_use_case.execute(request)
    except AuthenticationError as e:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(e),
        )


@router.get("/me", response_model=GetCurrentUserResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    jwt_service: FromDishka[JWTService],
    authorization: str | None = Header(default=None),
) -> GetCurrentUserResponse:
    """Get the currently authenticated user.

    Args:
        get_current_user_use_case: Get current user use case from DI
        jwt_service: JWT service for token verification (injected)
        authorization: Bearer token header

    Returns:
        Current user

    Raises:
        HTTPException: 401 if not authenticated, 404 if the user is gone
    """
    identity = require_identity(jwt_service, authorization)

    try:
        return await get_current_user_use_case.execute(
            GetCurrentUserRequest(user_id=identity.user_id)
        )
    except NotFoundError as e:
        logfire.warn("Authenticated user not found", user_id=identity.user_id)
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token is invalid. Authorization denied.",
        )
