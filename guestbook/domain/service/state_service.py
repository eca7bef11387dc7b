"""OAuth state token domain service."""

import logfire

from guestbook.config import AuthSettings
from guestbook.domain.value import LoginState
from guestbook.util.error import StateTokenError
from guestbook.util.state import create_state, verify_state

from .base import Service


class StateService(Service):
    """Domain service for the opaque state passed through the OAuth redirect."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize state service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    @property
    def is_configured(self) -> bool:
        """Whether a security key is available to sign states."""
        return bool(self.auth_settings.security_key)

    def create_state(self) -> str:
        """Create a state token carrying the post-login target."""
        return create_state(self.auth_settings.post_login_target, self.auth_settings)

    def verify_state(self, token: str | None) -> LoginState:
        """Verify a state token returned by the provider.

        Raises:
            StateTokenError: If the token is missing, invalid or expired
        """
        with logfire.span("state_service.verify_state"):
            if not token:
                raise StateTokenError("Missing state")
            try:
                return verify_state(token, self.auth_settings)
            except Exception as e:
                logfire.warn("State verification failed", error=str(e))
                raise
