"""Domain services."""

from .auth_service import AuthService, OAuthClient, OAuthClientFactory
from .base import Service
from .credential_service import ProviderCredentialService
from .guestbook_service import GuestbookService
from .identity_service import IdentityService
from .state_service import StateService

__all__ = [
    "AuthService",
    "GuestbookService",
    "IdentityService",
    "OAuthClient",
    "OAuthClientFactory",
    "ProviderCredentialService",
    "Service",
    "StateService",
]
