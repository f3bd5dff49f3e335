"""Unit tests for the Google OAuth client."""

from urllib.parse import parse_qs, urlparse

import httpx
import pytest

from humor.adapter.google import (
    GoogleOAuthError,
    MockGoogleOAuthClient,
    RealGoogleOAuthClient,
)
from humor.domain.value import AuthProvider

USER_INFO = {
    "sub": "1234567890",
    "email": "grace@example.com",
    "email_verified": True,
    "given_name": "Grace",
    "family_name": "Hopper",
    "picture": "https://lh3.googleusercontent.com/a/photo",
}


def _google(handler) -> RealGoogleOAuthClient:
    return RealGoogleOAuthClient(
        client_id="client-id",
        client_secret="client-secret",
        redirect_uri="http://localhost:8000/auth/callback",
        transport=httpx.MockTransport(handler),
    )


def _happy_handler(seen: dict):
    def handler(request: httpx.Request) -> httpx.Response:
        if request.url.host == "oauth2.googleapis.com":
            seen["token_form"] = parse_qs(request.content.decode())
            return httpx.Response(200, json={"access_token": "access-123"})
        seen["authorization"] = request.headers.get("authorization")
        return httpx.Response(200, json=USER_INFO)

    return handler


class TestRealGoogleOAuthClient:
    """Tests for RealGoogleOAuthClient."""

    @pytest.mark.asyncio
    async def test_authorization_url_carries_pkce_and_state(self):
        """The authorization URL has the state and an S256 challenge."""
        # Arrange
        client = _google(_happy_handler({}))

        # Act
        url = await client.initiate_authorization("state-abc")

        # Assert
        parsed = urlparse(url)
        params = parse_qs(parsed.query)
        assert parsed.netloc == "accounts.google.com"
        assert params["state"] == ["state-abc"]
        assert params["client_id"] == ["client-id"]
        assert params["code_challenge_method"] == ["S256"]
        assert params["scope"] == ["openid email profile"]
        assert params["redirect_uri"] == ["http://localhost:8000/auth/callback"]

    @pytest.mark.asyncio
    async def test_complete_authorization_maps_identity(self):
        """Code exchange and user info produce the provider identity."""
        # Arrange
        seen = {}
        client = _google(_happy_handler(seen))
        await client.initiate_authorization("state-abc")

        # Act
        info = await client.complete_authorization("code-xyz", "state-abc")

        # Assert
        assert info.provider == AuthProvider.GOOGLE
        assert info.provider_user_id == "1234567890"
        assert info.email == "grace@example.com"
        assert info.first_name == "Grace"
        assert info.last_name == "Hopper"
        assert info.verified is True
        assert seen["token_form"]["code"] == ["code-xyz"]
        assert seen["token_form"]["grant_type"] == ["authorization_code"]
        assert "code_verifier" in seen["token_form"]
        assert seen["authorization"] == "Bearer access-123"

    @pytest.mark.asyncio
    async def test_unknown_state_is_rejected(self):
        """A state that was never issued cannot complete login."""
        client = _google(_happy_handler({}))

        with pytest.raises(GoogleOAuthError, match="PKCE verifier not found"):
            await client.complete_authorization("code", "never-issued")

    @pytest.mark.asyncio
    async def test_state_is_single_use(self):
        """A state cannot be replayed after completing once."""
        client = _google(_happy_handler({}))
        await client.initiate_authorization("state-abc")
        await client.complete_authorization("code", "state-abc")

        with pytest.raises(GoogleOAuthError):
            await client.complete_authorization("code", "state-abc")

    @pytest.mark.asyncio
    async def test_token_exchange_failure(self):
        """A rejected code raises with the status code."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(400, json={"error": "invalid_grant"})

        client = _google(handler)
        await client.initiate_authorization("state-abc")

        with pytest.raises(GoogleOAuthError, match="Token exchange failed: 400"):
            await client.complete_authorization("bad", "state-abc")

    @pytest.mark.asyncio
    async def test_user_info_failure(self):
        """A failed user info request raises."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.host == "oauth2.googleapis.com":
                return httpx.Response(200, json={"access_token": "access-123"})
            return httpx.Response(401)

        client = _google(handler)
        await client.initiate_authorization("state-abc")

        with pytest.raises(GoogleOAuthError, match="User info request failed: 401"):
            await client.complete_authorization("code", "state-abc")

    @pytest.mark.asyncio
    async def test_network_failure(self):
        """Transport errors become provider errors."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("unreachable", request=request)

        client = _google(handler)
        await client.initiate_authorization("state-abc")

        with pytest.raises(GoogleOAuthError, match="HTTP error during token exchange"):
            await client.complete_authorization("code", "state-abc")


class TestMockGoogleOAuthClient:
    """Tests for MockGoogleOAuthClient."""

    @pytest.mark.asyncio
    async def test_mock_url_marks_itself(self):
        url = await MockGoogleOAuthClient().initiate_authorization("s1")

        assert "state=s1" in url
        assert "mock=true" in url

    @pytest.mark.asyncio
    async def test_invalid_code_fails(self):
        with pytest.raises(GoogleOAuthError):
            await MockGoogleOAuthClient().complete_authorization("invalid", "s1")
