"""In-memory repository implementations for testing."""

from .credential import InMemoryProviderCredentialRepository
from .greeting import InMemoryGreetingRepository
from .identity import InMemoryIdentityRepository

__all__ = [
    "InMemoryGreetingRepository",
    "InMemoryIdentityRepository",
    "InMemoryProviderCredentialRepository",
]
