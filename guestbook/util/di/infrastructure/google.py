"""Google infrastructure providers."""

from dishka import Scope, provide

from guestbook.adapter.google import (
    GoogleOAuthClientFactory,
    RealGoogleOAuthClientFactory,
)
from guestbook.config import GoogleOAuthSettings
from guestbook.util.di.base import ProviderBase


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_client_factory(
        self, settings: GoogleOAuthSettings
    ) -> GoogleOAuthClientFactory:
        """Provide Google OAuth client factory.

        Client ID and secret are not known here; they come from the stored
        app credential on every request.

        Returns:
            Factory for real Google OAuth clients
        """
        return RealGoogleOAuthClientFactory(settings)
