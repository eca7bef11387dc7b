"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Configuration error."""

    pass


class StateTokenError(UtilError):
    """OAuth state token could not be verified."""

    pass
