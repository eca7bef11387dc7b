"""Provider app credential repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from guestbook.domain.model.credential import ProviderAppCredential
from guestbook.domain.value import ProviderName


class ProviderCredentialRepository(ABC):
    """Repository for ProviderAppCredential, keyed by provider name."""

    @abstractmethod
    async def find_by_name(
        self, name: ProviderName
    ) -> Optional[ProviderAppCredential]:
        """Get the credential stored for a provider.

        Args:
            name: Provider name (e.g. "google")

        Returns:
            The credential if found, None otherwise
        """
        pass

    @abstractmethod
    async def add(self, credential: ProviderAppCredential) -> ProviderAppCredential:
        """Insert a credential that does not exist yet.

        Args:
            credential: Credential to insert

        Returns:
            The inserted credential

        Raises:
            ConflictError: If a credential with the same name already exists
        """
        pass

    @abstractmethod
    async def save(self, credential: ProviderAppCredential) -> ProviderAppCredential:
        """Create or replace a credential.

        Args:
            credential: Credential to save

        Returns:
            The saved credential
        """
        pass
