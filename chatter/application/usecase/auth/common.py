"""Shared auth response models."""

from datetime import datetime

from pydantic import BaseModel

from chatter.domain.model.user import User


class UserInfo(BaseModel):
    """Public profile of an authenticated user."""

    id: str
    username: str
    email: str
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            username=user.username.root,
            email=user.email.root,
            created_at=user.created_at,
        )


class AuthResponse(BaseModel):
    """Token and user returned after registration or login."""

    message: str
    token: str
    user: UserInfo
