"""OAuth infrastructure provider selecting the configured identity provider."""

from dishka import Scope, provide

from guestbook.adapter.google import GoogleOAuthClientFactory
from guestbook.config import AuthSettings
from guestbook.domain.service.auth_service import OAuthClientFactory
from guestbook.util.di.base import ProviderBase
from guestbook.util.error import ConfigurationError


class OAuthClientFactoryProvider(ProviderBase):
    """Provider that exposes the configured provider's client factory."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_oauth_client_factory(
        self,
        auth_settings: AuthSettings,
        google_client_factory: GoogleOAuthClientFactory,
    ) -> OAuthClientFactory:
        """Provide the client factory for AUTH__PROVIDER.

        Args:
            auth_settings: Authentication settings
            google_client_factory: Google client factory (specific type)

        Returns:
            Client factory used by the AuthService

        Raises:
            ConfigurationError: If the provider is not supported
        """
        factories: dict[str, OAuthClientFactory] = {
            "google": google_client_factory,
        }
        factory = factories.get(auth_settings.provider)
        if factory is None:
            raise ConfigurationError(
                f"Unsupported identity provider: {auth_settings.provider}"
            )
        return factory
