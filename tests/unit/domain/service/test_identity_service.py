"""Unit tests for IdentityService."""

from datetime import datetime, timedelta, timezone

import pytest

from guestbook.domain.error import NotFoundError
from guestbook.domain.model.identity import Identity
from guestbook.domain.repository import IdentityRepository
from guestbook.domain.service import IdentityService
from tests.conftest import make_credential
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_identity(subject: str, updated_at: datetime, name: str = "") -> Identity:
    return Identity(
        provider_subject_id=subject,
        display_name=name,
        credential=make_credential(name or subject),
        created_at=BASE_TIME,
        updated_at=updated_at,
    )


class TestFindByProviderSubjectId:
    """Tests for find_by_provider_subject_id method."""

    @pytest.mark.asyncio
    async def test_returns_single_identity(self, unit_env):
        """Should return the identity stored for the subject."""
        service = await unit_env.get(IdentityService)
        saved = await service.save(make_identity("subject-1", BASE_TIME))

        result = await service.find_by_provider_subject_id("subject-1")

        assert result == saved
        assert result.id is not None

    @pytest.mark.asyncio
    async def test_raises_not_found_when_absent(self, unit_env):
        """No identity for the subject should raise NotFoundError."""
        service = await unit_env.get(IdentityService)
        await service.save(make_identity("someone-else", BASE_TIME))

        with pytest.raises(NotFoundError):
            await service.find_by_provider_subject_id("subject-1")

    @pytest.mark.asyncio
    async def test_duplicates_resolve_to_latest_update(self, unit_env):
        """With duplicates, the most recently updated identity wins."""
        service = await unit_env.get(IdentityService)
        repo = await unit_env.get(IdentityRepository)
        await repo.save(
            make_identity("subject-1", BASE_TIME + timedelta(hours=1), name="newer")
        )
        await repo.save(make_identity("subject-1", BASE_TIME, name="older"))

        result = await service.find_by_provider_subject_id("subject-1")

        assert result.display_name == "newer"

    @pytest.mark.asyncio
    async def test_latest_wins_regardless_of_insert_order(self, unit_env):
        """The winner is chosen by updated_at, not by which row came first."""
        service = await unit_env.get(IdentityService)
        repo = await unit_env.get(IdentityRepository)
        await repo.save(make_identity("subject-1", BASE_TIME, name="older"))
        await repo.save(
            make_identity("subject-1", BASE_TIME + timedelta(hours=1), name="newer")
        )

        result = await service.find_by_provider_subject_id("subject-1")

        assert result.display_name == "newer"


class TestSave:
    """Tests for save method."""

    @pytest.mark.asyncio
    async def test_assigns_id_on_first_save(self, unit_env):
        service = await unit_env.get(IdentityService)

        saved = await service.save(make_identity("subject-1", BASE_TIME))

        assert saved.id is not None

    @pytest.mark.asyncio
    async def test_update_keeps_single_record(self, unit_env):
        """Saving an identity with an ID replaces it in place."""
        service = await unit_env.get(IdentityService)
        repo = await unit_env.get(IdentityRepository)
        saved = await service.save(make_identity("subject-1", BASE_TIME))

        updated = saved.model_copy(update={"display_name": "Renamed"})
        await service.save(updated)

        assert repo.count() == 1
        result = await service.find_by_provider_subject_id("subject-1")
        assert result.display_name == "Renamed"
        assert result.id == saved.id

    @pytest.mark.asyncio
    async def test_default_timestamps_compare_with_stored_ones(self, unit_env):
        """Identities built without timestamps sort alongside explicit ones."""
        service = await unit_env.get(IdentityService)
        await service.save(make_identity("subject-1", BASE_TIME, name="older"))
        fresh = Identity(
            provider_subject_id="subject-1",
            display_name="fresh",
            credential=make_credential("fresh"),
        )
        await service.save(fresh)

        result = await service.find_by_provider_subject_id("subject-1")

        assert fresh.updated_at.tzinfo is not None
        assert result.display_name == "fresh"
