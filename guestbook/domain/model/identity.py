"""Identity entity.

A person who signed in through the external provider.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from guestbook.domain.model.common import DomainModel
from guestbook.domain.model.credential import SessionCredential
from guestbook.domain.value import IdentityId


class Identity(DomainModel):
    """Locally known identity for a provider subject.

    There should be one per provider_subject_id. Logins refresh the
    embedded credential and updated_at; identities are never deleted.
    """

    id: Optional[IdentityId] = None  # Assigned by storage on first save
    provider_subject_id: str
    display_name: str = ""
    email: str = ""
    avatar_url: str = ""
    credential: SessionCredential
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
