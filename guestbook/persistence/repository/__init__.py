"""SQLAlchemy repository implementations."""

from guestbook.persistence.repository.credential import SqlProviderCredentialRepository
from guestbook.persistence.repository.greeting import SqlGreetingRepository
from guestbook.persistence.repository.identity import SqlIdentityRepository

__all__ = [
    "SqlGreetingRepository",
    "SqlIdentityRepository",
    "SqlProviderCredentialRepository",
]
