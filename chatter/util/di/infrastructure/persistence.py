"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from chatter.config import Settings
from chatter.domain.repository import CommentRepository, Transaction, UserRepository
from chatter.persistence.database import (
    create_engine,
    create_session_factory,
    unit_of_work,
)
from chatter.persistence.repository import (
    PostgresCommentRepository,
    PostgresUserRepository,
    SessionTransaction,
)
from chatter.util.di.base import ProviderBase
from chatter.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """PostgreSQL: one pool per process, one transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings.database, echo=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request transaction, committed when the request scope closes cleanly."""
        async with unit_of_work(session_factory) as session:
            yield session

    users = provide(
        PostgresUserRepository, provides=UserRepository, scope=Scope.REQUEST
    )
    comments = provide(
        PostgresCommentRepository, provides=CommentRepository, scope=Scope.REQUEST
    )
    transaction = provide(
        SessionTransaction, provides=Transaction, scope=Scope.REQUEST
    )
