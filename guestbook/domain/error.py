"""Domain layer errors."""

from guestbook.domain.value.types import FederationState


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a write collides with an existing record."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} already exists: {identifier}")


class FederationError(DomainError):
    """Base error for the OAuth login flow.

    Records the flow state the failure happened in.
    """

    def __init__(self, message: str, state: FederationState):
        self.state = state
        super().__init__(message)


class SetupFailureError(FederationError):
    """App credentials or the provider client could not be set up.

    Fatal for the current request.
    """

    pass


class ExchangeFailureError(FederationError):
    """The provider rejected the token exchange or the profile fetch.

    Reported to the caller; never retried.
    """

    pass
