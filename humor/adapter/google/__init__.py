"""Google OAuth 2.0 adapter."""

from .client import (
    GoogleOAuthClient,
    GoogleOAuthError,
    MockGoogleOAuthClient,
    RealGoogleOAuthClient,
)

__all__ = [
    "GoogleOAuthClient",
    "GoogleOAuthError",
    "MockGoogleOAuthClient",
    "RealGoogleOAuthClient",
]
