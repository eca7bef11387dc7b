"""OAuth credential entities."""

from datetime import datetime

from guestbook.domain.model.common import DomainModel
from guestbook.domain.value import ProviderName

PLACEHOLDER_CLIENT_ID = "<ClientID>"
PLACEHOLDER_CLIENT_SECRET = "<ClientSecret>"


class ProviderAppCredential(DomainModel):
    """Client ID and secret this application is registered with at a provider.

    One record per provider. Created with placeholder values on first use
    and replaced by re-provisioning; never deleted.
    """

    name: ProviderName
    client_id: str
    client_secret: str

    @classmethod
    def placeholder(cls, name: ProviderName) -> "ProviderAppCredential":
        """Build the default record written when none exists yet."""
        return cls(
            name=name,
            client_id=PLACEHOLDER_CLIENT_ID,
            client_secret=PLACEHOLDER_CLIENT_SECRET,
        )

    @property
    def is_placeholder(self) -> bool:
        return (
            self.client_id == PLACEHOLDER_CLIENT_ID
            or self.client_secret == PLACEHOLDER_CLIENT_SECRET
        )


class SessionCredential(DomainModel):
    """Token bundle returned by a successful token exchange.

    Embedded in the Identity that owns it.
    """

    id: str
    identity_token: str = ""
    access_token: str
    token_type: str = "Bearer"
    expires_at: datetime
