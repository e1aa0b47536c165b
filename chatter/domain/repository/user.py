"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from chatter.domain.model.user import User
from chatter.domain.value import UserId
from chatter.domain.value.types import Email, Username


class UserRepository(ABC):
    """Storage of registered users.

    Lookups return ``None`` when nothing matches. Emails arrive already
    normalised by ``Email``; usernames match regardless of case.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        pass

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Create the user or replace the stored user with the same id.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
