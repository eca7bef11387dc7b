"""Adapter layer errors.

Raised by clients of external services. The application layer translates
them into domain errors.
"""


class AdapterError(Exception):
    """Base adapter error."""


class ProviderError(AdapterError):
    """The identity provider rejected a request or could not be reached."""
