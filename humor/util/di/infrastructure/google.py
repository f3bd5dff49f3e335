"""Google sign-in provider."""

from dishka import Scope, provide

from humor.adapter.google import GoogleOAuthClient, RealGoogleOAuthClient
from humor.config import AuthSettings
from humor.util.di.base import ProviderBase
from humor.util.error import ConfigurationError


class GoogleProvider(ProviderBase):
    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Talks to Google with the configured OAuth web client."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def client(self, auth: AuthSettings) -> GoogleOAuthClient:
        """Build the client once per app, so PKCE verifiers outlive requests.

        Raises:
            ConfigurationError: If ``AUTH__GOOGLE__CLIENT_ID`` or
                ``AUTH__GOOGLE__CLIENT_SECRET`` is missing
        """
        missing = [
            name
            for name, value in (
                ("AUTH__GOOGLE__CLIENT_ID", auth.google.client_id),
                ("AUTH__GOOGLE__CLIENT_SECRET", auth.google.client_secret),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Google sign-in needs {', '.join(missing)}")

        return RealGoogleOAuthClient(
            client_id=auth.google.client_id,
            client_secret=auth.google.client_secret,
            redirect_uri=auth.google_callback_url,
        )
