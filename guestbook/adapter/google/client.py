"""Google OAuth 2.0 client implementation.

Implements the authorization code flow against Google's OAuth endpoints.
"""

from datetime import datetime, timedelta, timezone
from urllib.parse import urlencode
from uuid import uuid4

import httpx
import logfire

from guestbook.adapter.error import ProviderError
from guestbook.config import GoogleOAuthSettings
from guestbook.domain.model.credential import SessionCredential
from guestbook.domain.service.auth_service import OAuthClient, OAuthClientFactory
from guestbook.domain.value import OAuthClientConfig, ProviderProfile


class GoogleOAuthError(ProviderError):
    """Google OAuth error."""

    pass


def _check_callback_params(params: dict[str, str]) -> str:
    """Return the authorization code, or raise if the user did not consent."""
    if "error" in params:
        detail = params.get("error_description") or params["error"]
        raise GoogleOAuthError(f"Authorization failed: {detail}")

    code = params.get("code")
    if not code:
        raise GoogleOAuthError("Authorization code missing from callback")
    return code


class RealGoogleOAuthClient(OAuthClient):
    """Google OAuth 2.0 client.

    Bound to one (client_id, client_secret, redirect_uri) triple and built
    fresh for each request.
    """

    def __init__(self, config: OAuthClientConfig, settings: GoogleOAuthSettings) -> None:
        """Initialize Google OAuth client.

        Args:
            config: Client ID, secret and callback URL
            settings: Google endpoint settings
        """
        self.client_id = config.client_id
        self.client_secret = config.client_secret
        self.redirect_uri = config.redirect_uri

        self.authorize_url = settings.authorize_url
        self.token_url = settings.token_url
        self.user_info_url = settings.user_info_url
        self.scope = settings.scope
        self.timeout = settings.timeout_seconds

    async def build_authorization_url(self, state: str) -> str:
        """Build Google consent URL.

        Args:
            state: Opaque state token

        Returns:
            Authorization URL to redirect user to
        """
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": self.scope,
            "state": state,
        }

        auth_url = f"{self.authorize_url}?{urlencode(params)}"

        logfire.info(
            "Google OAuth authorization initiated",
            redirect_uri=self.redirect_uri,
        )

        return auth_url

    async def exchange(self, params: dict[str, str]) -> SessionCredential:
        """Exchange the authorization code for tokens.

        Args:
            params: Callback query parameters

        Returns:
            Session credential

        Raises:
            GoogleOAuthError: If consent was denied or the exchange fails
        """
        code = _check_callback_params(params)

        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Accept": "application/json"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google token exchange failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"Token exchange failed: {response.status_code}"
                    )

                result = response.json()

        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error during token exchange: {e}")

        if "access_token" not in result:
            raise GoogleOAuthError("Token response has no access_token")

        expires_in = int(result.get("expires_in", 3600))
        return SessionCredential(
            id=uuid4().hex,
            identity_token=result.get("id_token", ""),
            access_token=result["access_token"],
            token_type=result.get("token_type", "Bearer"),
            expires_at=datetime.now(timezone.utc) + timedelta(seconds=expires_in),
        )

    async def fetch_profile(self, credential: SessionCredential) -> ProviderProfile:
        """Get the signed-in user's Google profile.

        Args:
            credential: Credential from exchange()

        Returns:
            Provider profile

        Raises:
            GoogleOAuthError: If the request fails
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {credential.access_token}"},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Google user info request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GoogleOAuthError(
                        f"User info request failed: {response.status_code}"
                    )

                result = response.json()

        except httpx.HTTPError as e:
            logfire.error("Google user info HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching user info: {e}")

        if not result.get("id"):
            raise GoogleOAuthError("User info response has no id")

        logfire.info("Google profile fetched", subject_id=result["id"])

        return ProviderProfile(
            subject_id=str(result["id"]),
            name=result.get("name", ""),
            email=result.get("email", ""),
            avatar_url=result.get("picture", ""),
        )


class GoogleOAuthClientFactory(OAuthClientFactory):
    """Base class for Google client factories.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClientFactory(GoogleOAuthClientFactory):
    """Builds real Google clients."""

    def __init__(self, settings: GoogleOAuthSettings) -> None:
        self.settings = settings

    def create(self, config: OAuthClientConfig) -> OAuthClient:
        return RealGoogleOAuthClient(config, self.settings)


class MockGoogleOAuthClient(OAuthClient):
    """Mock Google OAuth client for testing.

    Returns deterministic test data without making real API calls.
    """

    SUBJECT_ID = "google-mock-123"

    def __init__(self, config: OAuthClientConfig) -> None:
        self.config = config

    async def build_authorization_url(self, state: str) -> str:
        params = {
            "client_id": self.config.client_id,
            "redirect_uri": self.config.redirect_uri,
            "state": state,
            "mock": "true",
        }
        return f"https://accounts.google.com/o/oauth2/auth?{urlencode(params)}"

    async def exchange(self, params: dict[str, str]) -> SessionCredential:
        code = _check_callback_params(params)
        return SessionCredential(
            id=f"mock-credential-{code}",
            identity_token="mock-id-token",
            access_token=f"mock-access-token-{code}",
            token_type="Bearer",
            expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
        )

    async def fetch_profile(self, credential: SessionCredential) -> ProviderProfile:
        return ProviderProfile(
            subject_id=self.SUBJECT_ID,
            name="Mock Google User",
            email="mock@example.com",
            avatar_url="https://example.com/avatar.jpg",
        )


class MockGoogleOAuthClientFactory(GoogleOAuthClientFactory):
    """Builds mock clients and remembers every configuration it was given."""

    def __init__(self) -> None:
        self.configs: list[OAuthClientConfig] = []

    def create(self, config: OAuthClientConfig) -> OAuthClient:
        self.configs.append(config)
        return MockGoogleOAuthClient(config)
