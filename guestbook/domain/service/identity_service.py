"""Identity domain service."""

import logfire

from guestbook.domain.error import NotFoundError
from guestbook.domain.model.identity import Identity
from guestbook.domain.repository import IdentityRepository

from .base import Service


class IdentityService(Service):
    """Domain service for identity lookup and persistence."""

    def __init__(self, identity_repository: IdentityRepository) -> None:
        """Initialize identity service.

        Args:
            identity_repository: Identity repository
        """
        self.identity_repository = identity_repository

    async def find_by_provider_subject_id(self, provider_subject_id: str) -> Identity:
        """Resolve the canonical identity for a provider subject.

        When racing logins left duplicates behind, the one with the latest
        updated_at wins.

        Args:
            provider_subject_id: Subject ID issued by the provider

        Returns:
            The canonical identity

        Raises:
            NotFoundError: If no identity exists for the subject
        """
        with logfire.span(
            "identity_service.find_by_provider_subject_id",
            provider_subject_id=provider_subject_id,
        ):
            identities = (
                await self.identity_repository.find_all_by_provider_subject_id(
                    provider_subject_id
                )
            )
            if not identities:
                logfire.info("Identity not found", provider_subject_id=provider_subject_id)
                raise NotFoundError("Identity", provider_subject_id)

            if len(identities) > 1:
                logfire.warn(
                    "Duplicate identities for subject",
                    provider_subject_id=provider_subject_id,
                    count=len(identities),
                )
            return identities[0]

    async def save(self, identity: Identity) -> Identity:
        """Save identity (create or update).

        Args:
            identity: Identity to save

        Returns:
            Saved identity
        """
        with logfire.span(
            "identity_service.save",
            provider_subject_id=identity.provider_subject_id,
            is_new=identity.id is None,
        ):
            saved = await self.identity_repository.save(identity)
            logfire.info(
                "Identity saved",
                identity_id=saved.id,
                provider_subject_id=saved.provider_subject_id,
            )
            return saved
