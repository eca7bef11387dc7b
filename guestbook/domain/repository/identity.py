"""Identity repository interface."""

from abc import ABC, abstractmethod

from guestbook.domain.model.identity import Identity


class IdentityRepository(ABC):
    """Repository for Identity entity."""

    @abstractmethod
    async def find_all_by_provider_subject_id(
        self, provider_subject_id: str
    ) -> list[Identity]:
        """Get every identity recorded for a provider subject.

        More than one only happens when concurrent logins raced.

        Args:
            provider_subject_id: The subject ID issued by the provider

        Returns:
            Identities ordered by updated_at, most recent first (may be empty)
        """
        pass

    @abstractmethod
    async def save(self, identity: Identity) -> Identity:
        """Save an identity.

        Inserts when the identity has no ID yet, updates otherwise. The write
        is durable when this returns. There is no compare-and-swap.

        Args:
            identity: The identity to save

        Returns:
            The saved identity, with its ID assigned
        """
        pass
