"""Bearer token helpers for routes."""

import logfire
from fastapi import HTTPException, status

from chatter.domain.error import AuthenticationError
from chatter.domain.service import JWTService
from chatter.util.jwt import TokenPayload


def require_identity(
    jwt_service: JWTService, authorization: str | None
) -> TokenPayload:
    """Resolve the caller from an ``Authorization`` header or fail with 401.

    Args:
        jwt_service: JWT service for token verification
        authorization: Raw ``Authorization`` header value

    Returns:
        Token payload of the caller

    Raises:
        HTTPException: 401 if the header is missing or the token is invalid
    """
    try:
        return jwt_service.authenticate_bearer(authorization)
    except AuthenticationError as e:
        logfire.info("Request rejected - not authenticated", reason=str(e))
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"{e}. Authorization denied.",
            headers={"WWW-Authenticate": "Bearer"},
        )
