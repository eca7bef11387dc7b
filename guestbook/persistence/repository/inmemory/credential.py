"""In-memory provider credential repository for testing."""

from typing import Optional

from guestbook.domain.error import ConflictError
from guestbook.domain.model.credential import ProviderAppCredential
from guestbook.domain.repository.credential import ProviderCredentialRepository
from guestbook.domain.value import ProviderName


class InMemoryProviderCredentialRepository(ProviderCredentialRepository):
    """In-memory implementation of ProviderCredentialRepository for testing."""

    def __init__(self) -> None:
        self._credentials: dict[str, ProviderAppCredential] = {}

    async def find_by_name(
        self, name: ProviderName
    ) -> Optional[ProviderAppCredential]:
        """Find credential by provider name."""
        return self._credentials.get(name)

    async def add(self, credential: ProviderAppCredential) -> ProviderAppCredential:
        """Insert credential, failing if the name is taken."""
        if credential.name in self._credentials:
            raise ConflictError("ProviderAppCredential", credential.name)
        self._credentials[credential.name] = credential
        return credential

    async def save(self, credential: ProviderAppCredential) -> ProviderAppCredential:
        """Create or replace credential."""
        self._credentials[credential.name] = credential
        return credential

    def count(self) -> int:
        """Number of stored credentials."""
        return len(self._credentials)
