"""Infrastructure providers."""

# Import bases
from .google import GoogleProvider
from .oauth import OAuthClientFactoryProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .google import ProdGoogleProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "GoogleProvider",
    "OAuthClientFactoryProvider",
    "PersistenceProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
]
