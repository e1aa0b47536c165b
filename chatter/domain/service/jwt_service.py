"""JWT token domain service."""

import logfire

from chatter.config import AuthSettings
from chatter.domain.error import AuthenticationError
from chatter.domain.model.user import User
from chatter.util.jwt import (
    JWTError,
    TokenClaims,
    TokenPayload,
    decode_token,
    encode_token,
)

from .base import Service


class JWTService(Service):
    """Domain service issuing and verifying bearer tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user: User) -> str:
        """Create JWT token for user.

        Args:
            user: Authenticated user

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=str(user.id)):
            token = encode_token(
                TokenClaims(
                    user_id=str(user.id),
                    email=user.email.root,
                    username=user.username.root,
                ),
                self.auth_settings,
            )
            logfire.info("JWT token created", user_id=str(user.id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = decode_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise AuthenticationError(str(e)) from e
            logfire.debug("JWT token verified", user_id=payload.user_id)
            return payload

    def authenticate_bearer(self, authorization: str | None) -> TokenPayload:
        """Resolve an ``Authorization: Bearer <token>`` header to an identity.

        Args:
            authorization: Raw header value (optional)

        Returns:
            Token payload of the caller

        Raises:
            AuthenticationError: If the header is missing, malformed or the
                token is invalid
        """
        if not authorization:
            raise AuthenticationError("No token provided")

        scheme, _, token = authorization.partition(" ")
        if scheme.lower() != "bearer" or not token.strip():
            raise AuthenticationError("Invalid token format")

        return self.verify_token(token.strip())
