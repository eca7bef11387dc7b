"""Unit tests for AuthService."""

from urllib.parse import parse_qs, urlparse

import pytest

from guestbook.adapter.google import GoogleOAuthClientFactory, MockGoogleOAuthClientFactory
from guestbook.config import AuthSettings
from guestbook.domain.error import SetupFailureError
from guestbook.domain.model.credential import PLACEHOLDER_CLIENT_ID
from guestbook.domain.service import (
    AuthService,
    ProviderCredentialService,
    StateService,
)
from guestbook.domain.value import FederationState, RequestOrigin
from guestbook.persistence.repository.inmemory import (
    InMemoryProviderCredentialRepository,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ORIGIN = RequestOrigin(scheme="http", host="guestbook.example.com")


def build_auth_service(
    auth_settings: AuthSettings,
) -> tuple[AuthService, InMemoryProviderCredentialRepository, MockGoogleOAuthClientFactory]:
    repo = InMemoryProviderCredentialRepository()
    factory = MockGoogleOAuthClientFactory()
    service = AuthService(
        credential_service=ProviderCredentialService(credential_repository=repo),
        state_service=StateService(auth_settings=auth_settings),
        client_factory=factory,
        auth_settings=auth_settings,
    )
    return service, repo, factory


class TestCallbackUrl:
    """Tests for callback_url method."""

    @pytest.mark.asyncio
    async def test_plain_http(self, unit_env):
        service = await unit_env.get(AuthService)

        assert (
            service.callback_url(ORIGIN)
            == "http://guestbook.example.com/oauth/callback"
        )

    @pytest.mark.asyncio
    async def test_forwarded_scheme_and_port(self, unit_env):
        """Proxy headers should shape the public callback URL."""
        service = await unit_env.get(AuthService)
        origin = RequestOrigin(
            scheme="http",
            host="guestbook.example.com",
            forwarded_scheme="https",
            server_port="8443",
        )

        assert (
            service.callback_url(origin)
            == "https://guestbook.example.com:8443/oauth/callback"
        )


class TestInitializeClient:
    """Tests for initialize_client method."""

    @pytest.mark.asyncio
    async def test_same_origin_gives_identical_config(self, unit_env):
        """Two initializations from the same origin build the same client config."""
        service = await unit_env.get(AuthService)
        factory = await unit_env.get(GoogleOAuthClientFactory)

        await service.initialize_client(ORIGIN)
        await service.initialize_client(ORIGIN)

        assert len(factory.configs) == 2
        assert factory.configs[0] == factory.configs[1]

    @pytest.mark.asyncio
    async def test_uses_provisioned_credentials(self, unit_env):
        """The client is built from the stored (here placeholder) credential."""
        service = await unit_env.get(AuthService)
        factory = await unit_env.get(GoogleOAuthClientFactory)

        await service.initialize_client(ORIGIN)

        config = factory.configs[0]
        assert config.client_id == PLACEHOLDER_CLIENT_ID
        assert config.redirect_uri == "http://guestbook.example.com/oauth/callback"

    @pytest.mark.asyncio
    async def test_missing_security_key_is_setup_failure(self):
        """Without a security key no client is built."""
        service, repo, factory = build_auth_service(AuthSettings(security_key=None))

        with pytest.raises(SetupFailureError) as exc_info:
            await service.initialize_client(ORIGIN)

        assert exc_info.value.state == FederationState.APP_CREDENTIAL_READY
        assert factory.configs == []
        # Provisioning still happened before the key check
        assert repo.count() == 1

    @pytest.mark.asyncio
    async def test_empty_security_key_is_setup_failure(self):
        service, _, _ = build_auth_service(AuthSettings(security_key=""))

        with pytest.raises(SetupFailureError):
            await service.initiate_login(ORIGIN)


class TestInitiateLogin:
    """Tests for initiate_login method."""

    @pytest.mark.asyncio
    async def test_returns_provider_url_with_verifiable_state(self, unit_env):
        service = await unit_env.get(AuthService)
        state_service = await unit_env.get(StateService)

        url = await service.initiate_login(ORIGIN)

        query = parse_qs(urlparse(url).query)
        assert url.startswith("https://accounts.google.com/o/oauth2/auth")
        assert query["redirect_uri"] == [
            "http://guestbook.example.com/oauth/callback"
        ]
        login_state = state_service.verify_state(query["state"][0])
        assert login_state.after == "success"

    @pytest.mark.asyncio
    async def test_each_login_gets_fresh_state(self, unit_env):
        service = await unit_env.get(AuthService)

        first = parse_qs(urlparse(await service.initiate_login(ORIGIN)).query)
        second = parse_qs(urlparse(await service.initiate_login(ORIGIN)).query)

        assert first["state"] != second["state"]
