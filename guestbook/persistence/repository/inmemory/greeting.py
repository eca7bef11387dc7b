"""In-memory greeting repository for testing."""

from guestbook.domain.model.greeting import Greeting
from guestbook.domain.repository.greeting import GreetingRepository


class InMemoryGreetingRepository(GreetingRepository):
    """In-memory implementation of GreetingRepository for testing."""

    def __init__(self) -> None:
        self._partitions: dict[str, list[Greeting]] = {}

    async def append(self, greeting: Greeting) -> Greeting:
        """Append greeting to its partition."""
        self._partitions.setdefault(greeting.partition_key, []).append(greeting)
        return greeting

    async def list_recent(self, partition_key: str, limit: int) -> list[Greeting]:
        """Newest greetings of a partition."""
        greetings = self._partitions.get(partition_key, [])
        # Insertion order breaks created_at ties, newest write first
        ordered = sorted(
            enumerate(greetings),
            key=lambda pair: (pair[1].created_at, pair[0]),
            reverse=True,
        )
        return [greeting for _, greeting in ordered[:limit]]
