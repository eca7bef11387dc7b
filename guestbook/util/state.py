"""Opaque OAuth state tokens.

The state sent to the provider is a short-lived JWT signed with the
application's security key. It carries the post-login redirect target and a
random nonce, so the callback can be checked without server-side storage.
"""

import secrets
from datetime import datetime, timedelta, timezone

import jwt

from guestbook.config import AuthSettings
from guestbook.domain.value import LoginState
from guestbook.util.error import ConfigurationError, StateTokenError


def _security_key(settings: AuthSettings) -> str:
    if not settings.security_key:
        raise ConfigurationError("AUTH__SECURITY_KEY is not set")
    return settings.security_key


def create_state(after: str, settings: AuthSettings) -> str:
    """Create a signed state token.

    Args:
        after: Post-login redirect target
        settings: Authentication settings

    Returns:
        Encoded state token

    Raises:
        ConfigurationError: If no security key is configured
    """
    key = _security_key(settings)
    expiry = datetime.now(timezone.utc) + timedelta(minutes=settings.state_ttl_minutes)

    payload = {
        "after": after,
        "nonce": secrets.token_urlsafe(16),
        "exp": expiry,
    }

    return jwt.encode(payload, key, algorithm=settings.state_algorithm)


def verify_state(token: str, settings: AuthSettings) -> LoginState:
    """Verify and decode a state token.

    Args:
        token: State token from the OAuth callback
        settings: Authentication settings

    Returns:
        Decoded state

    Raises:
        ConfigurationError: If no security key is configured
        StateTokenError: If the token is invalid or expired
    """
    key = _security_key(settings)
    try:
        payload = jwt.decode(token, key, algorithms=[settings.state_algorithm])
    except jwt.ExpiredSignatureError:
        raise StateTokenError("State has expired")
    except jwt.InvalidTokenError:
        raise StateTokenError("Invalid state")

    try:
        return LoginState(after=payload["after"], nonce=payload["nonce"])
    except KeyError as e:
        raise StateTokenError(f"State is missing {e.args[0]}")
