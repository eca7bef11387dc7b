"""Guestbook use cases."""

from .list_greetings import ListGreetingsUseCase
from .sign_guestbook import SignGuestbookUseCase

__all__ = ["ListGreetingsUseCase", "SignGuestbookUseCase"]
