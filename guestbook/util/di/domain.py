"""Domain layer DI providers."""

from dishka import Scope, provide

from guestbook.config import AuthSettings, GuestbookSettings
from guestbook.domain.repository import (
    GreetingRepository,
    IdentityRepository,
    ProviderCredentialRepository,
)
from guestbook.domain.service import (
    AuthService,
    GuestbookService,
    IdentityService,
    OAuthClientFactory,
    ProviderCredentialService,
    StateService,
)
from guestbook.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide
    def get_credential_service(
        self, credential_repository: ProviderCredentialRepository
    ) -> ProviderCredentialService:
        """Provide provider app credential service."""
        return ProviderCredentialService(credential_repository=credential_repository)

    @provide
    def get_identity_service(
        self, identity_repository: IdentityRepository
    ) -> IdentityService:
        """Provide identity resolver service."""
        return IdentityService(identity_repository=identity_repository)

    @provide
    def get_state_service(self, auth_settings: AuthSettings) -> StateService:
        """Provide OAuth state token service."""
        return StateService(auth_settings=auth_settings)

    @provide
    def get_auth_service(
        self,
        credential_service: ProviderCredentialService,
        state_service: StateService,
        client_factory: OAuthClientFactory,
        auth_settings: AuthSettings,
    ) -> AuthService:
        """Provide authentication domain service."""
        return AuthService(
            credential_service=credential_service,
            state_service=state_service,
            client_factory=client_factory,
            auth_settings=auth_settings,
        )

    @provide
    def get_guestbook_service(
        self, greeting_repository: GreetingRepository, settings: GuestbookSettings
    ) -> GuestbookService:
        """Provide guestbook domain service."""
        return GuestbookService(greeting_repository=greeting_repository, settings=settings)
