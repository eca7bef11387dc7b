"""Greeting repository implementation using SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from guestbook.domain.model.greeting import Greeting
from guestbook.domain.repository.greeting import GreetingRepository
from guestbook.persistence.mappers import greeting_to_dict, row_to_greeting
from guestbook.persistence.tables import greetings_table


class SqlGreetingRepository(GreetingRepository):
    """SQLAlchemy implementation of GreetingRepository.

    The partition is the partition_key column; every read filters on it.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def append(self, greeting: Greeting) -> Greeting:
        """Insert a greeting and commit it.

        Committed here rather than at the end of the request, so the write is
        durable before the caller redirects to a read.

        Args:
            greeting: Greeting to write

        Returns:
            Written greeting
        """
        stmt = greetings_table.insert().values(**greeting_to_dict(greeting))
        await self.session.execute(stmt)
        await self.session.commit()
        return greeting

    async def list_recent(self, partition_key: str, limit: int) -> list[Greeting]:
        """Get the newest greetings of a partition.

        Args:
            partition_key: Partition to read
            limit: Maximum number of greetings

        Returns:
            Greetings, newest first
        """
        stmt = (
            select(greetings_table)
            .where(greetings_table.c.partition_key == partition_key)
            .order_by(greetings_table.c.created_at.desc(), greetings_table.c.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        rows = result.mappings().all()

        return [row_to_greeting(dict(row)) for row in rows]
