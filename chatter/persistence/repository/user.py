"""PostgreSQL implementation of User repository."""

from typing import Optional

from sqlalchemy import ColumnElement, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.domain.model import User
from chatter.domain.repository import UserRepository
from chatter.domain.value import UserId
from chatter.domain.value.types import Email, Username
from chatter.persistence.mappers import row_to_user, user_to_dict
from chatter.persistence.tables import users_table

_u = users_table.c


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    Email and case-insensitive username uniqueness are enforced by the
    schema; a violating ``save`` raises ``IntegrityError`` after rolling
    back only its own savepoint.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _find_one(self, condition: ColumnElement[bool]) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(condition))
        row = result.mappings().first()
        return row_to_user(row) if row else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._find_one(_u.id == user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        return await self._find_one(_u.email == email.root)

    async def find_by_username(self, username: Username) -> Optional[User]:
        # Served by the lower(username) unique index
        return await self._find_one(func.lower(_u.username) == username.root.lower())

    async def save(self, user: User) -> User:
        """Insert the user, or overwrite the row with the same id."""
        values = user_to_dict(user)
        stmt = (
            insert(users_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[_u.id],
                set_={k: v for k, v in values.items() if k not in ("id", "created_at")},
            )
        )
        # A uniqueness violation rolls back only this savepoint
        async with self.session.begin_nested():
            await self.session.execute(stmt)
        return user
