"""Infrastructure providers."""

from .google import GoogleProvider, ProdGoogleProvider
from .oauth import OAuthAggregatorProvider
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = [
    "GoogleProvider",
    "OAuthAggregatorProvider",
    "PersistenceProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
]
