"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone

import logfire

# Test defaults; real environment variables take precedence
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__SECURITY_KEY", "test-security-key-with-at-least-32-bytes")
os.environ.setdefault("DATABASE__URL", "sqlite+aiosqlite:///:memory:")

# Keep spans local and quiet
logfire.configure(send_to_logfire=False, console=False)

from guestbook.domain.model.credential import SessionCredential  # noqa: E402


def make_credential(suffix: str = "1") -> SessionCredential:
    """Helper to build a session credential for test identities."""
    return SessionCredential(
        id=f"credential-{suffix}",
        identity_token=f"id-token-{suffix}",
        access_token=f"access-token-{suffix}",
        token_type="Bearer",
        expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
    )
