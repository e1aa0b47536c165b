"""SQLAlchemy session transaction."""

import logfire
from sqlalchemy.ext.asyncio import AsyncSession

from chatter.domain.repository import Transaction


class SessionTransaction(Transaction):
    """Commits the request-scoped ``AsyncSession``.

    The session autobegins a new transaction on its next statement, which
    ``unit_of_work`` commits or rolls back when the request ends.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def commit(self) -> None:
        await self.session.commit()
        logfire.debug("Transaction committed")
