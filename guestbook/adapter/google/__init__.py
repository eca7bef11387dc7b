"""Google OAuth adapter."""

from .client import (
    GoogleOAuthClientFactory,
    GoogleOAuthError,
    MockGoogleOAuthClient,
    MockGoogleOAuthClientFactory,
    RealGoogleOAuthClient,
    RealGoogleOAuthClientFactory,
)

__all__ = [
    "GoogleOAuthClientFactory",
    "GoogleOAuthError",
    "MockGoogleOAuthClient",
    "MockGoogleOAuthClientFactory",
    "RealGoogleOAuthClient",
    "RealGoogleOAuthClientFactory",
]
