"""Core DI providers (non-mockable)."""

from dishka import Scope, provide

from guestbook.config import (
    AuthSettings,
    GoogleOAuthSettings,
    GuestbookSettings,
    Settings,
)
from guestbook.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Production config provider - concrete, no mocks needed.

    Settings are loaded from environment variables and .env file automatically.
    """

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        """Provide application settings from environment."""
        return Settings()

    @provide(scope=Scope.APP)
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Provide auth settings."""
        return settings.auth

    @provide(scope=Scope.APP)
    def provide_google_settings(self, auth_settings: AuthSettings) -> GoogleOAuthSettings:
        """Provide Google endpoint settings."""
        return auth_settings.google

    @provide(scope=Scope.APP)
    def provide_guestbook_settings(self, settings: Settings) -> GuestbookSettings:
        """Provide guestbook settings."""
        return settings.guestbook
