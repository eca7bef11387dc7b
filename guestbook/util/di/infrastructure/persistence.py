"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from guestbook.config import Settings
from guestbook.domain.repository import (
    GreetingRepository,
    IdentityRepository,
    ProviderCredentialRepository,
)
from guestbook.persistence.database import (
    create_engine,
    create_schema,
    create_session_factory,
)
from guestbook.persistence.repository import (
    SqlGreetingRepository,
    SqlIdentityRepository,
    SqlProviderCredentialRepository,
)
from guestbook.util.di.base import ProviderBase
from guestbook.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using SQLAlchemy."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine.

        SQLite databases get their tables created on first use; PostgreSQL
        is migrated with Alembic.
        """
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)

        if make_url(settings.database_url).get_backend_name() == "sqlite":
            await create_schema(engine)

        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        Repositories commit their own writes. Anything still pending when the
        request ends is rolled back as the session closes.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_credential_repository(
        self, session: AsyncSession
    ) -> ProviderCredentialRepository:
        """Provide provider credential repository."""
        return SqlProviderCredentialRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_identity_repository(self, session: AsyncSession) -> IdentityRepository:
        """Provide identity repository."""
        return SqlIdentityRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_greeting_repository(self, session: AsyncSession) -> GreetingRepository:
        """Provide greeting repository."""
        return SqlGreetingRepository(session)
