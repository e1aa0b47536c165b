"""Unit tests for JWTService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import jwt
import pytest

from chatter.config import AuthSettings
from chatter.domain.error import AuthenticationError
from chatter.domain.model.user import User
from chatter.domain.service import JWTService
from chatter.domain.value import UserId
from chatter.domain.value.types import Email, Username

SETTINGS = AuthSettings(jwt_secret="test-secret", jwt_expiry_days=7)


def _user() -> User:
    return User(
        id=UserId(uuid4()),
        username=Username("alice"),
        email=Email("alice@example.com"),
        password_hash="not-a-real-hash",
    )


class TestJWTService:
    """Tests for token issuing and verification."""

    def test_token_round_trip_carries_identity(self):
        """Verified tokens expose user_id, email and username."""
        # Arrange
        jwt_service = JWTService(auth_settings=SETTINGS)
        user = _user()

        # Act
        payload = jwt_service.verify_token(jwt_service.create_token(user))

        # Assert
        assert payload.user_id == str(user.id)
        assert payload.email == "alice@example.com"
        assert payload.username == "alice"

    def test_expired_token_rejected(self):
        jwt_service = JWTService(auth_settings=SETTINGS)
        token = jwt.encode(
            {
                "user_id": str(uuid4()),
                "email": "alice@example.com",
                "username": "alice",
                "exp": datetime.now(timezone.utc) - timedelta(minutes=1),
            },
            SETTINGS.jwt_secret,
            algorithm=SETTINGS.jwt_algorithm,
        )

        with pytest.raises(AuthenticationError, match="expired"):
            jwt_service.verify_token(token)

    def test_token_signed_with_other_secret_rejected(self):
        other = JWTService(auth_settings=AuthSettings(jwt_secret="other-secret"))
        token = other.create_token(_user())

        with pytest.raises(AuthenticationError, match="Invalid token"):
            JWTService(auth_settings=SETTINGS).verify_token(token)

    @pytest.mark.parametrize(
        "header",
        [None, "", "Token abc", "Bearer", "Bearer   ", "Bearer not.a.jwt"],
    )
    def test_authenticate_bearer_rejects_bad_headers(self, header):
        jwt_service = JWTService(auth_settings=SETTINGS)

        with pytest.raises(AuthenticationError):
            jwt_service.authenticate_bearer(header)

    def test_authenticate_bearer_accepts_valid_header(self):
        jwt_service = JWTService(auth_settings=SETTINGS)
        user = _user()

        payload = jwt_service.authenticate_bearer(
            f"Bearer {jwt_service.create_token(user)}"
        )

        assert payload.user_id == str(user.id)
