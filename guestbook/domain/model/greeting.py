"""Greeting entity."""

from datetime import datetime

from guestbook.domain.model.common import DomainModel


class Greeting(DomainModel):
    """A signed guestbook entry.

    Every greeting carries the same partition key so all entries share one
    consistency group. An empty author means the visitor was anonymous.
    """

    author: str = ""
    content: str
    created_at: datetime
    partition_key: str

    @property
    def is_anonymous(self) -> bool:
        return not self.author
