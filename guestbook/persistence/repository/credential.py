"""ProviderAppCredential repository implementation using SQLAlchemy."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from guestbook.domain.error import ConflictError
from guestbook.domain.model.credential import ProviderAppCredential
from guestbook.domain.repository.credential import ProviderCredentialRepository
from guestbook.domain.value import ProviderName
from guestbook.persistence.mappers import (
    provider_credential_to_dict,
    row_to_provider_credential,
)
from guestbook.persistence.tables import provider_credentials_table


class SqlProviderCredentialRepository(ProviderCredentialRepository):
    """SQLAlchemy implementation of ProviderCredentialRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_name(
        self, name: ProviderName
    ) -> Optional[ProviderAppCredential]:
        """Get the credential stored for a provider.

        Args:
            name: Provider name

        Returns:
            ProviderAppCredential if found, None otherwise
        """
        stmt = select(provider_credentials_table).where(
            provider_credentials_table.c.name == name
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_provider_credential(dict(row)) if row else None

    async def add(self, credential: ProviderAppCredential) -> ProviderAppCredential:
        """Insert a new credential and commit it.

        Args:
            credential: Credential to insert

        Returns:
            Inserted credential

        Raises:
            ConflictError: If the provider already has a credential
        """
        stmt = provider_credentials_table.insert().values(
            **provider_credential_to_dict(credential)
        )
        try:
            await self.session.execute(stmt)
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictError("ProviderAppCredential", credential.name)

        return credential

    async def save(self, credential: ProviderAppCredential) -> ProviderAppCredential:
        """Create or replace a credential and commit it.

        Args:
            credential: Credential to save

        Returns:
            Saved credential
        """
        credential_dict = provider_credential_to_dict(credential)

        existing = await self.find_by_name(credential.name)

        if existing:
            stmt = (
                provider_credentials_table.update()
                .where(provider_credentials_table.c.name == credential.name)
                .values(**credential_dict)
            )
        else:
            stmt = provider_credentials_table.insert().values(**credential_dict)

        await self.session.execute(stmt)
        await self.session.commit()
        return credential
