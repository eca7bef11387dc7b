"""In-memory identity repository for testing."""

from itertools import count

from guestbook.domain.model.identity import Identity
from guestbook.domain.repository.identity import IdentityRepository
from guestbook.domain.value import IdentityId


class InMemoryIdentityRepository(IdentityRepository):
    """In-memory implementation of IdentityRepository for testing."""

    def __init__(self) -> None:
        self._identities: list[Identity] = []
        self._ids = count(1)

    async def find_all_by_provider_subject_id(
        self, provider_subject_id: str
    ) -> list[Identity]:
        """Find identities for a subject, latest update first."""
        matches = [
            i for i in self._identities if i.provider_subject_id == provider_subject_id
        ]
        matches.sort(key=lambda i: (i.updated_at, i.id), reverse=True)
        return matches

    async def save(self, identity: Identity) -> Identity:
        """Save identity, assigning an ID on first save."""
        if identity.id is None:
            identity = identity.model_copy(update={"id": IdentityId(next(self._ids))})
            self._identities.append(identity)
            return identity

        for i, existing in enumerate(self._identities):
            if existing.id == identity.id:
                self._identities[i] = identity
                return identity

        self._identities.append(identity)
        return identity

    def count(self) -> int:
        """Number of stored identities."""
        return len(self._identities)
