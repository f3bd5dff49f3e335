"""Registry of sign-in clients, keyed by provider."""

from dishka import Scope, provide

from humor.adapter.google import GoogleOAuthClient
from humor.domain.service.auth_service import OAuthClient
from humor.domain.value import AuthProvider
from humor.util.di.base import ProviderBase


class OAuthAggregatorProvider(ProviderBase):
    """Exposes every sign-in client to ``AuthService`` as one mapping.

    Google is the only provider today. Another one is added by giving it a
    component provider and a key here.
    """

    @provide(scope=Scope.APP)
    def clients(self, google: GoogleOAuthClient) -> dict[AuthProvider, OAuthClient]:
        return {AuthProvider.GOOGLE: google}
