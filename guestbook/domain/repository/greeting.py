"""Greeting repository interface."""

from abc import ABC, abstractmethod

from guestbook.domain.model.greeting import Greeting


class GreetingRepository(ABC):
    """Repository for Greeting entity.

    Greetings are grouped by partition key. Reads scoped to a partition must
    observe every write to that partition committed before the read started.
    """

    @abstractmethod
    async def append(self, greeting: Greeting) -> Greeting:
        """Durably write a greeting under its partition.

        Args:
            greeting: Greeting to write

        Returns:
            The written greeting
        """
        pass

    @abstractmethod
    async def list_recent(self, partition_key: str, limit: int) -> list[Greeting]:
        """Get the most recent greetings of a partition.

        Args:
            partition_key: Consistency group to read
            limit: Maximum number of greetings

        Returns:
            Greetings ordered by created_at, newest first
        """
        pass
