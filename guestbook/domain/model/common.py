"""Base model for all domain entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Base class for identities, credentials and greetings.

    Entities are frozen; changes are made with model_copy(update=...) and
    saved back through a repository.
    """

    model_config = ConfigDict(frozen=True)
