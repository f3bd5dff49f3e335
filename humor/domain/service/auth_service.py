"""Authentication domain service."""

from abc import ABC, abstractmethod

from humor.domain.value.types import AuthProvider, OAuthProviderInfo

from .base import Service


class OAuthClient(ABC):
    """Authorization-code flow against one identity provider."""

    @abstractmethod
    async def initiate_authorization(self, state: str) -> str:
        """Return the provider URL the browser should be sent to.

        ``state`` comes back unchanged on the callback and ties the two
        halves of the flow together.
        """

    @abstractmethod
    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Trade the callback's code for the user's identity at the provider."""


class AuthService(Service):
    """Routes login steps to the OAuth client of the chosen provider."""

    def __init__(self, oauth_clients: dict[AuthProvider, OAuthClient]) -> None:
        self.oauth_clients = oauth_clients

    def client_for(self, provider: AuthProvider) -> OAuthClient:
        """OAuth client for a provider.

        Raises:
            ValueError: If no client is configured for the provider
        """
        try:
            return self.oauth_clients[provider]
        except KeyError:
            raise ValueError(f"Unsupported provider: {provider}") from None

    async def initiate_login(self, provider: AuthProvider, state: str) -> str:
        """Start a login and return the provider's authorization URL."""
        return await self.client_for(provider).initiate_authorization(state)

    async def complete_login(
        self, provider: AuthProvider, code: str, state: str
    ) -> OAuthProviderInfo:
        """Finish a login started with ``initiate_login``.

        Raises:
            ValueError: If provider not supported
            ProviderError: If the provider rejects the code or is unreachable
        """
        return await self.client_for(provider).complete_authorization(code, state)
