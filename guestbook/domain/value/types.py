"""Domain value objects for the guestbook.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from guestbook.domain.value.common import ValueObject


class FederationState(str, Enum):
    """Steps of the OAuth login flow, in order."""

    START = "start"
    APP_CREDENTIAL_READY = "app_credential_ready"
    PROVIDER_INITIALIZED = "provider_initialized"
    REDIRECT_ISSUED = "redirect_issued"
    CALLBACK_RECEIVED = "callback_received"
    EXCHANGE_COMPLETE = "exchange_complete"
    IDENTITY_FETCHED = "identity_fetched"
    PERSISTED = "persisted"
    FAILED = "failed"


class RequestOrigin(ValueObject):
    """Where an inbound request was addressed to.

    Captures the parts of a request needed to rebuild the OAuth callback
    URL, so the login and callback steps derive the same value.
    """

    scheme: str  # Scheme seen by the server ("http" or "https")
    host: str  # Host header as received
    forwarded_scheme: str | None = None  # X-Forwarded-Scheme
    server_port: str | None = None  # X-Server-Port

    @property
    def base_url(self) -> str:
        """Public base URL of this service, e.g. https://example.com:8443."""
        scheme = "http"
        if self.scheme == "https" or self.forwarded_scheme == "https":
            scheme = "https"

        hostname = self.host
        if self.server_port:
            hostname = f"{hostname}:{self.server_port}"

        return f"{scheme}://{hostname}"


class OAuthClientConfig(ValueObject):
    """Everything needed to construct a provider client."""

    client_id: str
    client_secret: str
    redirect_uri: str

    @field_validator("client_id", "client_secret", "redirect_uri")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("OAuth client configuration values must not be empty")
        return v


class ProviderProfile(ValueObject):
    """Profile returned by the identity provider."""

    subject_id: str  # Permanent ID issued by the provider
    name: str = ""
    email: str = ""
    avatar_url: str = ""


class LoginState(ValueObject):
    """Decoded contents of the opaque state token."""

    after: str  # Post-login redirect target
    nonce: str
