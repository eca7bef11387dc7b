"""Identity repository implementation using SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from guestbook.domain.model.identity import Identity
from guestbook.domain.repository.identity import IdentityRepository
from guestbook.domain.value import IdentityId
from guestbook.persistence.mappers import identity_to_dict, row_to_identity
from guestbook.persistence.tables import identities_table


class SqlIdentityRepository(IdentityRepository):
    """SQLAlchemy implementation of IdentityRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_all_by_provider_subject_id(
        self, provider_subject_id: str
    ) -> list[Identity]:
        """Get all identities for a provider subject, latest update first.

        Args:
            provider_subject_id: Subject ID issued by the provider

        Returns:
            List of identities (may be empty)
        """
        stmt = (
            select(identities_table)
            .where(identities_table.c.provider_subject_id == provider_subject_id)
            .order_by(identities_table.c.updated_at.desc(), identities_table.c.id.desc())
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()

        return [row_to_identity(dict(row)) for row in rows]

    async def save(self, identity: Identity) -> Identity:
        """Save identity to database and commit it.

        The write is durable when this returns.

        Args:
            identity: Identity to save

        Returns:
            Saved identity with its ID
        """
        identity_dict = identity_to_dict(identity)

        if identity.id is None:
            stmt = identities_table.insert().values(**identity_dict)
            result = await self.session.execute(stmt)
            await self.session.commit()
            new_id = IdentityId(result.inserted_primary_key[0])
            return identity.model_copy(update={"id": new_id})

        stmt = (
            identities_table.update()
            .where(identities_table.c.id == identity.id)
            .values(**identity_dict)
        )
        await self.session.execute(stmt)
        await self.session.commit()
        return identity
