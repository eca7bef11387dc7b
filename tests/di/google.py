"""Mock Google providers for testing."""

from dishka import Scope, provide

from guestbook.adapter.google import GoogleOAuthClientFactory, MockGoogleOAuthClientFactory
from guestbook.util.di.infrastructure.google import GoogleProvider


class MockGoogleProvider(GoogleProvider):
    """Mock Google provider using mock OAuth clients."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_google_client_factory(self) -> GoogleOAuthClientFactory:
        """Provide mock Google OAuth client factory.

        APP-scoped so tests can inspect every client configuration it built.
        """
        return MockGoogleOAuthClientFactory()
