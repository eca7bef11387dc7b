"""Domain value objects for the guestbook."""

from guestbook.domain.value.identifiers import IdentityId, ProviderName
from guestbook.domain.value.types import (
    FederationState,
    LoginState,
    OAuthClientConfig,
    ProviderProfile,
    RequestOrigin,
)

__all__ = [
    # Identifiers
    "IdentityId",
    "ProviderName",
    # Types
    "FederationState",
    "LoginState",
    "OAuthClientConfig",
    "ProviderProfile",
    "RequestOrigin",
]
