"""Google OAuth 2.0 client implementation.

Implements the authorization code flow with PKCE against Google's
OpenID Connect endpoints.
"""

from urllib.parse import urlencode

import httpx
import logfire

from humor.adapter.error import ProviderError
from humor.adapter.google.pkce import generate_pkce_pair
from humor.domain.service.auth_service import OAuthClient
from humor.domain.value.types import AuthProvider, OAuthProviderInfo


class GoogleOAuthError(ProviderError):
    """Google OAuth error."""

    pass


class GoogleOAuthClient(OAuthClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(GoogleOAuthClient):
    """Google OAuth 2.0 client with PKCE support."""

    authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
    token_url = "https://oauth2.googleapis.com/token"
    user_info_url = "https://openidconnect.googleapis.com/v1/userinfo"

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Google OAuth client.

        Args:
            client_id: Google OAuth client ID
            client_secret: Google OAuth client secret
            redirect_uri: Callback URL registered with Google
            transport: Optional httpx transport (tests pass a MockTransport)
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.transport = transport

        # PKCE verifiers per state (in-memory, single process)
        self._pkce_verifiers: dict[str, str] = {}

    def _http(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=self.transport, timeout=30.0)

    async def initiate_authorization(self, state: str) -> str:
        """Build the Google authorization URL.

        Args:
            state: State parameter for CSRF protection

        Returns:
            Authorization URL to redirect user to
        """
        code_verifier, code_challenge = generate_pkce_pair()
        self._pkce_verifiers[state] = code_verifier

        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
            "scope": "openid email profile",
            "state": state,
            "code_challenge": code_challenge,
            "code_challenge_method": "S256",
            "prompt": "select_account",
        }

        logfire.info(
            "Google OAuth authorization initiated",
            state=state,
            redirect_uri=self.redirect_uri,
        )

        return f"{self.authorize_url}?{urlencode(params)}"

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Exchange the authorization code and fetch the user's identity.

        Args:
            code: Authorization code from Google callback
            state: State parameter for verification

        Returns:
            User information from Google

        Raises:
            GoogleOAuthError: If the state is unknown or any request fails
        """
        code_verifier = self._pkce_verifiers.pop(state, None)
        if not code_verifier:
            raise GoogleOAuthError("Invalid state or PKCE verifier not found")

        access_token = await self._exchange_code_for_token(code, code_verifier)
        user_info = await self._get_user_info(access_token)

        if "sub" not in user_info:
            raise GoogleOAuthError("User info response is missing 'sub'")

        logfire.info("Google OAuth completed", subject=user_info["sub"])

        return OAuthProviderInfo(
            provider=AuthProvider.GOOGLE,
            provider_user_id=user_info["sub"],
            email=user_info.get("email"),
            first_name=user_info.get("given_name"),
            last_name=user_info.get("family_name"),
            avatar_url=user_info.get("picture"),
            verified=user_info.get("email_verified", False),
        )

    async def _exchange_code_for_token(self, code: str, code_verifier: str) -> str:
        """Exchange authorization code for access token.

        Raises:
            GoogleOAuthError: If token exchange fails
        """
        data = {
            "code": code,
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "redirect_uri": self.redirect_uri,
            "code_verifier": code_verifier,
        }

        try:
            async with self._http() as client:
                response = await client.post(
                    self.token_url,
                    data=data,
                    headers={"Content-Type": "application/x-www-form-urlencoded"},
                )
        except httpx.HTTPError as e:
            logfire.error("Google token exchange HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error during token exchange: {e}")

        if response.status_code != 200:
            logfire.error(
                "Google token exchange failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleOAuthError(f"Token exchange failed: {response.status_code}")

        return response.json()["access_token"]

    async def _get_user_info(self, access_token: str) -> dict:
        """Get user information from Google's userinfo endpoint.

        Raises:
            GoogleOAuthError: If the request fails
        """
        try:
            async with self._http() as client:
                response = await client.get(
                    self.user_info_url,
                    headers={"Authorization": f"Bearer {access_token}"},
                )
        except httpx.HTTPError as e:
            logfire.error("Google user info HTTP error", error=str(e))
            raise GoogleOAuthError(f"HTTP error fetching user info: {e}")

        if response.status_code != 200:
            logfire.error(
                "Google user info request failed",
                status_code=response.status_code,
                error=response.text,
            )
            raise GoogleOAuthError(f"User info request failed: {response.status_code}")

        return response.json()


class MockGoogleOAuthClient(GoogleOAuthClient):
    """Mock Google OAuth client for testing.

    Returns deterministic test data without making real API calls.
    """

    async def initiate_authorization(self, state: str) -> str:
        """Return mock authorization URL."""
        return f"https://accounts.google.com/o/oauth2/v2/auth?state={state}&mock=true"

    async def complete_authorization(self, code: str, state: str) -> OAuthProviderInfo:
        """Return mock user information.

        Raises:
            GoogleOAuthError: If ``code`` is "invalid"
        """
        if code == "invalid":
            raise GoogleOAuthError("Token exchange failed: 400")

        return OAuthProviderInfo(
            provider=AuthProvider.GOOGLE,
            provider_user_id="mockgoogle123",
            email="mock.user@example.com",
            first_name="Mock",
            last_name="User",
            avatar_url="https://example.com/avatar.jpg",
            verified=True,
        )
