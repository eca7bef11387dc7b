"""Provider app credential domain service."""

import logfire

from guestbook.domain.error import ConflictError
from guestbook.domain.model.credential import ProviderAppCredential
from guestbook.domain.repository import ProviderCredentialRepository
from guestbook.domain.value import ProviderName

from .base import Service


class ProviderCredentialService(Service):
    """Domain service for the app credentials registered with a provider."""

    def __init__(self, credential_repository: ProviderCredentialRepository) -> None:
        """Initialize credential service.

        Args:
            credential_repository: Provider credential repository
        """
        self.credential_repository = credential_repository

    async def get_or_provision(self, provider: ProviderName) -> ProviderAppCredential:
        """Get the app credential for a provider, creating a placeholder if absent.

        Once the record exists this is a pure read. Storage errors propagate
        as-is; nothing is retried here.

        Two first requests may both see no record and both try to write one.
        The loser gets a ConflictError from the repository and reads back
        the winner's record instead.

        Args:
            provider: Provider name

        Returns:
            The stored (or newly provisioned) credential
        """
        with logfire.span("credential_service.get_or_provision", provider=provider):
            credential = await self.credential_repository.find_by_name(provider)
            if credential:
                return credential

            logfire.info("No app credential stored, provisioning placeholder", provider=provider)
            placeholder = ProviderAppCredential.placeholder(provider)
            try:
                return await self.credential_repository.add(placeholder)
            except ConflictError:
                logfire.warn("App credential provisioned concurrently, re-reading", provider=provider)
                credential = await self.credential_repository.find_by_name(provider)
                if credential is None:
                    raise
                return credential

    async def reprovision(
        self, provider: ProviderName, client_id: str, client_secret: str
    ) -> ProviderAppCredential:
        """Store real app credentials for a provider.

        Args:
            provider: Provider name
            client_id: OAuth client ID issued by the provider
            client_secret: OAuth client secret issued by the provider

        Returns:
            The saved credential
        """
        with logfire.span("credential_service.reprovision", provider=provider):
            credential = ProviderAppCredential(
                name=provider, client_id=client_id, client_secret=client_secret
            )
            saved = await self.credential_repository.save(credential)
            logfire.info("App credential reprovisioned", provider=provider)
            return saved
