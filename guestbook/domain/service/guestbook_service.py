"""Guestbook domain service."""

from datetime import datetime

import logfire

from guestbook.config import GuestbookSettings
from guestbook.domain.error import ValidationError
from guestbook.domain.model.greeting import Greeting
from guestbook.domain.repository import GreetingRepository

from .base import Service

MAX_RECENT_LIMIT = 100


class GuestbookService(Service):
    """Domain service for signing and reading the guestbook.

    All greetings live in one partition (settings.partition_key), which is
    what makes a read observe every earlier write.
    """

    def __init__(
        self, greeting_repository: GreetingRepository, settings: GuestbookSettings
    ) -> None:
        """Initialize guestbook service.

        Args:
            greeting_repository: Greeting repository
            settings: Guestbook settings
        """
        self.greeting_repository = greeting_repository
        self.settings = settings

    async def append(self, author: str, content: str, now: datetime) -> Greeting:
        """Sign the guestbook.

        Callers must keep writes to the partition serialized at no more than
        settings.max_writes_per_second (about one per second). Above that
        rate, reads on sharded substrates may miss recent greetings for a
        while. This is not enforced here.

        Args:
            author: Signed-in principal, or "" for anonymous
            content: Greeting text (duplicates are allowed)
            now: Creation time

        Returns:
            The written greeting
        """
        with logfire.span(
            "guestbook_service.append",
            partition_key=self.settings.partition_key,
            anonymous=not author,
        ):
            greeting = Greeting(
                author=author,
                content=content,
                created_at=now,
                partition_key=self.settings.partition_key,
            )
            written = await self.greeting_repository.append(greeting)
            logfire.info(
                "Guestbook signed",
                partition_key=written.partition_key,
                anonymous=written.is_anonymous,
            )
            return written

    async def list_recent(self, limit: int | None = None) -> list[Greeting]:
        """Get the most recent greetings, newest first.

        Args:
            limit: Window size (defaults to settings.recent_limit)

        Returns:
            Up to limit greetings

        Raises:
            ValidationError: If limit is outside 1..100
        """
        if limit is None:
            limit = self.settings.recent_limit
        if limit < 1 or limit > MAX_RECENT_LIMIT:
            raise ValidationError(f"limit must be between 1 and {MAX_RECENT_LIMIT}")

        with logfire.span(
            "guestbook_service.list_recent",
            partition_key=self.settings.partition_key,
            limit=limit,
        ):
            return await self.greeting_repository.list_recent(
                self.settings.partition_key, limit
            )
