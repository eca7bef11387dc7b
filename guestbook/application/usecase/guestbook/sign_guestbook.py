"""Sign guestbook use case."""

from datetime import datetime, timezone

from pydantic import BaseModel

from guestbook.application.usecase.base import BaseUseCase
from guestbook.application.usecase.guestbook.list_greetings import GreetingInfo
from guestbook.domain.service import GuestbookService


class SignGuestbookRequest(BaseModel):
    """Sign guestbook request."""

    author: str = ""  # Empty when the visitor is not signed in
    content: str


class SignGuestbookUseCase(BaseUseCase[SignGuestbookRequest, GreetingInfo]):
    """Use case for appending a greeting."""

    def __init__(self, guestbook_service: GuestbookService) -> None:
        """Initialize sign guestbook use case.

        Args:
            guestbook_service: Guestbook domain service
        """
        self.guestbook_service = guestbook_service

    async def execute(self, request: SignGuestbookRequest) -> GreetingInfo:
        """Append a greeting stamped with the current time."""
        greeting = await self.guestbook_service.append(
            author=request.author,
            content=request.content,
            now=datetime.now(timezone.utc),
        )
        return GreetingInfo.from_greeting(greeting)
