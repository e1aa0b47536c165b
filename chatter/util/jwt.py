"""Bearer token encoding with PyJWT.

Tokens carry the caller's identity (``user_id``, ``email``, ``username``)
so that requests can be authorised without a user lookup.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from chatter.config import AuthSettings

_REQUIRED_CLAIMS = ["exp", "user_id", "email", "username"]


class TokenClaims(BaseModel):
    """Identity carried by a bearer token."""

    user_id: str
    email: str
    username: str


class TokenPayload(TokenClaims):
    """Decoded token: identity plus validity window."""

    exp: datetime
    iat: datetime | None = None


class JWTError(Exception):
    """Token could not be decoded or is no longer valid."""


def encode_token(claims: TokenClaims, settings: AuthSettings) -> str:
    """Sign ``claims`` into a token valid for ``jwt_expiry_days``."""
    issued_at = datetime.now(timezone.utc)
    return jwt.encode(
        {
            **claims.model_dump(),
            "iat": issued_at,
            "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
        },
        settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify signature and expiry, then return the payload.

    Raises:
        JWTError: If the token is expired, tampered with or lacks a claim
    """
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": _REQUIRED_CLAIMS},
        )
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")

    try:
        return TokenPayload.model_validate(payload)
    except ValidationError:
        raise JWTError("Invalid token")
