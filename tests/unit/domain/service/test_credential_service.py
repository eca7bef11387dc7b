"""Unit tests for ProviderCredentialService."""

import pytest

from guestbook.domain.model.credential import (
    PLACEHOLDER_CLIENT_ID,
    PLACEHOLDER_CLIENT_SECRET,
    ProviderAppCredential,
)
from guestbook.domain.repository import ProviderCredentialRepository
from guestbook.domain.service import ProviderCredentialService
from guestbook.domain.value import ProviderName
from guestbook.persistence.repository.inmemory import (
    InMemoryProviderCredentialRepository,
)
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

GOOGLE = ProviderName("google")


class RacingCredentialRepository(InMemoryProviderCredentialRepository):
    """Another writer provisions the record between our read and our insert."""

    def __init__(self) -> None:
        super().__init__()
        self.reads = 0

    async def find_by_name(self, name):
        self.reads += 1
        if self.reads == 1:
            self._credentials[name] = ProviderAppCredential(
                name=name, client_id="winner-id", client_secret="winner-secret"
            )
            return None
        return await super().find_by_name(name)


class TestGetOrProvision:
    """Tests for get_or_provision method."""

    @pytest.mark.asyncio
    async def test_provisions_placeholder_when_absent(self, unit_env):
        """First call should write and return placeholder credentials."""
        service = await unit_env.get(ProviderCredentialService)
        repo = await unit_env.get(ProviderCredentialRepository)

        credential = await service.get_or_provision(GOOGLE)

        assert credential.name == GOOGLE
        assert credential.client_id == PLACEHOLDER_CLIENT_ID
        assert credential.client_secret == PLACEHOLDER_CLIENT_SECRET
        assert credential.is_placeholder
        assert await repo.find_by_name(GOOGLE) == credential

    @pytest.mark.asyncio
    async def test_repeated_calls_return_same_record(self, unit_env):
        """Provisioning is idempotent: one record, equal results."""
        service = await unit_env.get(ProviderCredentialService)
        repo = await unit_env.get(ProviderCredentialRepository)

        first = await service.get_or_provision(GOOGLE)
        second = await service.get_or_provision(GOOGLE)

        assert first == second
        assert repo.count() == 1

    @pytest.mark.asyncio
    async def test_existing_record_is_returned_unchanged(self, unit_env):
        """A stored credential should be read, never overwritten."""
        service = await unit_env.get(ProviderCredentialService)
        repo = await unit_env.get(ProviderCredentialRepository)
        stored = ProviderAppCredential(
            name=GOOGLE, client_id="real-id", client_secret="real-secret"
        )
        await repo.add(stored)

        credential = await service.get_or_provision(GOOGLE)

        assert credential == stored
        assert not credential.is_placeholder

    @pytest.mark.asyncio
    async def test_concurrent_provisioning_reads_back_winner(self):
        """Losing the insert race should return the other writer's record."""
        repo = RacingCredentialRepository()
        service = ProviderCredentialService(credential_repository=repo)

        credential = await service.get_or_provision(GOOGLE)

        assert credential.client_id == "winner-id"
        assert repo.count() == 1
        assert repo.reads == 2


class TestReprovision:
    """Tests for reprovision method."""

    @pytest.mark.asyncio
    async def test_replaces_placeholder(self, unit_env):
        """Reprovisioning should overwrite the placeholder values."""
        service = await unit_env.get(ProviderCredentialService)
        repo = await unit_env.get(ProviderCredentialRepository)
        await service.get_or_provision(GOOGLE)

        await service.reprovision(GOOGLE, "real-id", "real-secret")
        credential = await service.get_or_provision(GOOGLE)

        assert credential.client_id == "real-id"
        assert credential.client_secret == "real-secret"
        assert not credential.is_placeholder
        assert repo.count() == 1
