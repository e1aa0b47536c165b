"""In-memory user repository for testing."""

from typing import Optional

from chatter.domain.model.user import User
from chatter.domain.repository.user import UserRepository
from chatter.domain.value import UserId
from chatter.domain.value.types import Email, Username


class InMemoryUserRepository(UserRepository):
    """Users keyed by id, with lookup indexes on email and lower-cased username."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}
        self._by_email: dict[str, UserId] = {}
        self._by_username: dict[str, UserId] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        user_id = self._by_email.get(email.root)
        return self._users.get(user_id) if user_id else None

    async def find_by_username(self, username: Username) -> Optional[User]:
        user_id = self._by_username.get(username.root.lower())
        return self._users.get(user_id) if user_id else None

    async def save(self, user: User) -> User:
        previous = self._users.get(user.id)
        if previous is not None:
            self._by_email.pop(previous.email.root, None)
            self._by_username.pop(previous.username.root.lower(), None)

        self._users[user.id] = user
        self._by_email[user.email.root] = user.id
        self._by_username[user.username.root.lower()] = user.id
        return user
