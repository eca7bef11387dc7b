"""Repository interfaces for the guestbook domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from guestbook.domain.repository.credential import ProviderCredentialRepository
from guestbook.domain.repository.greeting import GreetingRepository
from guestbook.domain.repository.identity import IdentityRepository

__all__ = [
    "GreetingRepository",
    "IdentityRepository",
    "ProviderCredentialRepository",
]
