"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from guestbook.domain.model import (
    Greeting,
    Identity,
    ProviderAppCredential,
    SessionCredential,
)
from guestbook.domain.value import IdentityId, ProviderName


def row_to_provider_credential(row: Dict[str, Any]) -> ProviderAppCredential:
    """Convert database row to ProviderAppCredential domain model."""
    return ProviderAppCredential(
        name=ProviderName(row["name"]),
        client_id=row["client_id"],
        client_secret=row["client_secret"],
    )


def provider_credential_to_dict(credential: ProviderAppCredential) -> Dict[str, Any]:
    """Convert ProviderAppCredential domain model to database dict."""
    return credential.model_dump()


def row_to_identity(row: Dict[str, Any]) -> Identity:
    """Convert database row to Identity domain model.

    The session credential is stored in prefixed columns of the same row.

    Args:
        row: Database row as dict

    Returns:
        Identity domain model
    """
    return Identity(
        id=IdentityId(row["id"]),
        provider_subject_id=row["provider_subject_id"],
        display_name=row.get("display_name") or "",
        email=row.get("email") or "",
        avatar_url=row.get("avatar_url") or "",
        credential=SessionCredential(
            id=row["credential_id"],
            identity_token=row.get("credential_identity_token") or "",
            access_token=row["credential_access_token"],
            token_type=row["credential_token_type"],
            expires_at=row["credential_expires_at"],
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def identity_to_dict(identity: Identity) -> Dict[str, Any]:
    """Convert Identity domain model to database dict.

    The ID is left out; storage assigns it on insert.

    Args:
        identity: Identity domain model

    Returns:
        Dict suitable for database insertion/update
    """
    credential = identity.credential
    return {
        "provider_subject_id": identity.provider_subject_id,
        "display_name": identity.display_name,
        "email": identity.email,
        "avatar_url": identity.avatar_url,
        "credential_id": credential.id,
        "credential_identity_token": credential.identity_token,
        "credential_access_token": credential.access_token,
        "credential_token_type": credential.token_type,
        "credential_expires_at": credential.expires_at,
        "created_at": identity.created_at,
        "updated_at": identity.updated_at,
    }


def row_to_greeting(row: Dict[str, Any]) -> Greeting:
    """Convert database row to Greeting domain model."""
    return Greeting(
        author=row.get("author") or "",
        content=row["content"],
        created_at=row["created_at"],
        partition_key=row["partition_key"],
    )


def greeting_to_dict(greeting: Greeting) -> Dict[str, Any]:
    """Convert Greeting domain model to database dict."""
    return greeting.model_dump()
