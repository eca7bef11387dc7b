"""List greetings use case."""

from datetime import datetime

from pydantic import BaseModel

from guestbook.application.usecase.base import BaseUseCase
from guestbook.domain.model.greeting import Greeting
from guestbook.domain.service import GuestbookService


class ListGreetingsRequest(BaseModel):
    """List greetings request."""

    limit: int | None = None  # Defaults to the configured window


class GreetingInfo(BaseModel):
    """Greeting information for response."""

    author: str
    content: str
    created_at: datetime
    anonymous: bool

    @classmethod
    def from_greeting(cls, greeting: Greeting) -> "GreetingInfo":
        return cls(
            author=greeting.author,
            content=greeting.content,
            created_at=greeting.created_at,
            anonymous=greeting.is_anonymous,
        )


class ListGreetingsResponse(BaseModel):
    """List greetings response, newest first."""

    greetings: list[GreetingInfo]


class ListGreetingsUseCase(
    BaseUseCase[ListGreetingsRequest, ListGreetingsResponse]
):
    """Use case for reading the most recent greetings."""

    def __init__(self, guestbook_service: GuestbookService) -> None:
        """Initialize list greetings use case.

        Args:
            guestbook_service: Guestbook domain service
        """
        self.guestbook_service = guestbook_service

    async def execute(self, request: ListGreetingsRequest) -> ListGreetingsResponse:
        """Read the most recent greetings.

        Raises:
            ValidationError: If the limit is out of range
        """
        greetings = await self.guestbook_service.list_recent(request.limit)
        return ListGreetingsResponse(
            greetings=[GreetingInfo.from_greeting(g) for g in greetings]
        )
