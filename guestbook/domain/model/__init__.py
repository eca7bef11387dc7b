"""Domain model entities for the guestbook."""

from guestbook.domain.model.credential import (
    ProviderAppCredential,
    SessionCredential,
)
from guestbook.domain.model.greeting import Greeting
from guestbook.domain.model.identity import Identity

__all__ = [
    "Greeting",
    "Identity",
    "ProviderAppCredential",
    "SessionCredential",
]
