"""Authentication domain service.

The provider client is rebuilt on every call from the stored app credential
and the inbound request. Nothing links the login redirect to the callback
except the signed state, so both steps must derive identical client
configuration from the same inputs.
"""

import logfire

from guestbook.config import AuthSettings
from guestbook.domain.error import SetupFailureError
from guestbook.domain.model.credential import ProviderAppCredential, SessionCredential
from guestbook.domain.value import (
    FederationState,
    OAuthClientConfig,
    ProviderName,
    ProviderProfile,
    RequestOrigin,
)
from guestbook.util.error import ConfigurationError

from .base import Service
from .credential_service import ProviderCredentialService
from .state_service import StateService


class OAuthClient:
    """Client for a single OAuth 2.0 identity provider."""

    async def build_authorization_url(self, state: str) -> str:
        """Build the URL to send the user to for consent.

        Args:
            state: Opaque state token, echoed back on the callback

        Returns:
            Authorization URL
        """
        raise NotImplementedError

    async def exchange(self, params: dict[str, str]) -> SessionCredential:
        """Exchange callback query parameters for a session credential.

        Args:
            params: Query parameters of the OAuth callback

        Returns:
            Session credential issued by the provider

        Raises:
            ProviderError: If the provider rejects the exchange
        """
        raise NotImplementedError

    async def fetch_profile(self, credential: SessionCredential) -> ProviderProfile:
        """Fetch the signed-in user's profile.

        Args:
            credential: Credential from exchange()

        Returns:
            Provider profile

        Raises:
            ProviderError: If the profile request fails
        """
        raise NotImplementedError


class OAuthClientFactory:
    """Builds provider clients from configuration."""

    def create(self, config: OAuthClientConfig) -> OAuthClient:
        raise NotImplementedError


class AuthService(Service):
    """Domain service for the OAuth login flow."""

    def __init__(
        self,
        credential_service: ProviderCredentialService,
        state_service: StateService,
        client_factory: OAuthClientFactory,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            credential_service: Provider app credential service
            state_service: State token service
            client_factory: Builds the provider client for each request
            auth_settings: Authentication settings
        """
        self.credential_service = credential_service
        self.state_service = state_service
        self.client_factory = client_factory
        self.auth_settings = auth_settings

    @property
    def provider(self) -> ProviderName:
        return ProviderName(self.auth_settings.provider)

    def callback_url(self, origin: RequestOrigin) -> str:
        """OAuth redirect URI for requests arriving at origin."""
        return origin.base_url + self.auth_settings.callback_path

    def client_config(
        self, credential: ProviderAppCredential, origin: RequestOrigin
    ) -> OAuthClientConfig:
        """Build provider client configuration.

        Pure function of its inputs.
        """
        return OAuthClientConfig(
            client_id=credential.client_id,
            client_secret=credential.client_secret,
            redirect_uri=self.callback_url(origin),
        )

    async def initialize_client(self, origin: RequestOrigin) -> OAuthClient:
        """Resolve app credentials and build the provider client.

        Args:
            origin: Where the current request was addressed to

        Returns:
            Provider client bound to this request's callback URL

        Raises:
            SetupFailureError: If the security key is missing or the client
                cannot be constructed
        """
        with logfire.span("auth_service.initialize_client", provider=self.provider):
            credential = await self.credential_service.get_or_provision(self.provider)
            logfire.info(
                "Login flow state",
                state=FederationState.APP_CREDENTIAL_READY.value,
                provider=self.provider,
                placeholder=credential.is_placeholder,
            )

            if not self.state_service.is_configured:
                raise SetupFailureError(
                    "Security key is not configured",
                    state=FederationState.APP_CREDENTIAL_READY,
                )

            try:
                config = self.client_config(credential, origin)
                client = self.client_factory.create(config)
            except (ConfigurationError, ValueError) as e:
                logfire.error("Provider client setup failed", error=str(e))
                raise SetupFailureError(
                    f"Provider client setup failed: {e}",
                    state=FederationState.APP_CREDENTIAL_READY,
                ) from e

            logfire.info(
                "Login flow state",
                state=FederationState.PROVIDER_INITIALIZED.value,
                redirect_uri=config.redirect_uri,
            )
            return client

    async def initiate_login(self, origin: RequestOrigin) -> str:
        """Start the login flow.

        Args:
            origin: Where the current request was addressed to

        Returns:
            Provider authorization URL to redirect the user to

        Raises:
            SetupFailureError: If the provider client cannot be set up
        """
        logfire.info(
            "Login flow state", state=FederationState.START.value, provider=self.provider
        )
        client = await self.initialize_client(origin)

        try:
            state = self.state_service.create_state()
        except ConfigurationError as e:
            raise SetupFailureError(
                str(e), state=FederationState.PROVIDER_INITIALIZED
            ) from e

        auth_url = await client.build_authorization_url(state)
        logfire.info(
            "Login flow state",
            state=FederationState.REDIRECT_ISSUED.value,
            provider=self.provider,
        )
        return auth_url
