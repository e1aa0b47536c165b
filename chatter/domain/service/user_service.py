"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from chatter.domain.error import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from chatter.domain.model.user import User
from chatter.domain.repository import UserRepository
from chatter.domain.value import UserId
from chatter.domain.value.types import Email, Username
from chatter.util.password import hash_password, verify_password

from .base import Service

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 128


class UserService(Service):
    """Domain service for registration and credential checks."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def register(self, username: str, email: str, password: str) -> User:
        """Register a new user.

        Args:
            username: Desired username
            email: Email address
            password: Plain text password

        Returns:
            Created user

        Raises:
            ValidationError: If any field is malformed
            ConflictError: If the email or username is already taken
        """
        try:
            valid_username = Username(username)
            valid_email = Email(email)
        except PydanticValidationError as e:
            raise ValidationError(e.errors()[0]["msg"]) from e
        if not MIN_PASSWORD_LENGTH <= len(password) <= MAX_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be between {MIN_PASSWORD_LENGTH} and "
                f"{MAX_PASSWORD_LENGTH} characters"
            )

        with logfire.span("user_service.register", username=valid_username.root):
            if await self.user_repository.find_by_email(valid_email):
                logfire.info("Registration with taken email")
                raise ConflictError("email", "Email already registered")
            if await self.user_repository.find_by_username(valid_username):
                logfire.info(
                    "Registration with taken username", username=valid_username.root
                )
                raise ConflictError("username", "Username already taken")

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                username=valid_username,
                email=valid_email,
                password_hash=hash_password(password),
                created_at=now,
                updated_at=now,
            )
            try:
                saved = await self.user_repository.save(user)
            except IntegrityError:
                # Lost a race with a concurrent registration
                logfire.warn("Duplicate registration", username=valid_username.root)
                raise ConflictError("email", "Email or username already registered")

            logfire.info(
                "User registered", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def authenticate(self, email: str, password: str) -> User:
        """Check email and password.

        Args:
            email: Email address
            password: Plain text password

        Returns:
            The authenticated user

        Raises:
            AuthenticationError: If the credentials don't match a user
        """
        with logfire.span("user_service.authenticate"):
            try:
                valid_email = Email(email)
            except PydanticValidationError:
                raise AuthenticationError("Invalid credentials")

            user = await self.user_repository.find_by_email(valid_email)
            if user is None:
                logfire.info("Login for unknown email")
                raise AuthenticationError("Invalid credentials")

            is_valid, new_hash = verify_password(password, user.password_hash)
            if not is_valid:
                logfire.info("Login with wrong password", user_id=str(user.id))
                raise AuthenticationError("Invalid credentials")

            if new_hash:
                user = await self.user_repository.save(
                    user.touched(password_hash=new_hash)
                )
                logfire.info("Password rehashed", user_id=str(user.id))

            logfire.info("User authenticated", user_id=str(user.id))
            return user

    async def get_user(self, user_id: UserId) -> User:
        """Get a user by ID.

        Args:
            user_id: User ID

        Returns:
            The user

        Raises:
            NotFoundError: If the user doesn't exist
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            logfire.warn("User not found", user_id=str(user_id))
            raise NotFoundError("User", str(user_id))
        return user
