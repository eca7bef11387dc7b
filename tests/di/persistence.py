"""Mock persistence providers for testing."""

from dishka import Scope, provide

from guestbook.domain.repository import (
    GreetingRepository,
    IdentityRepository,
    ProviderCredentialRepository,
)
from guestbook.persistence.repository.inmemory import (
    InMemoryGreetingRepository,
    InMemoryIdentityRepository,
    InMemoryProviderCredentialRepository,
)
from guestbook.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data written in one request is visible to the next,
    the same way a database would behave. Each test builds its own
    container, so tests stay isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_credential_repository(self) -> ProviderCredentialRepository:
        """Provide in-memory provider credential repository."""
        return InMemoryProviderCredentialRepository()

    @provide(scope=Scope.APP)
    def get_identity_repository(self) -> IdentityRepository:
        """Provide in-memory identity repository."""
        return InMemoryIdentityRepository()

    @provide(scope=Scope.APP)
    def get_greeting_repository(self) -> GreetingRepository:
        """Provide in-memory greeting repository."""
        return InMemoryGreetingRepository()
