"""PKCE (Proof Key for Code Exchange) helpers for the Google OAuth flow."""

import secrets
from base64 import urlsafe_b64encode
from hashlib import sha256


def _b64url(data: bytes) -> str:
    return urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def generate_pkce_pair() -> tuple[str, str]:
    """Generate a PKCE verifier and its S256 challenge.

    The challenge goes into the authorization URL; the verifier is kept
    server-side and sent with the code exchange.

    Returns:
        Tuple of (verifier, challenge), both base64url without padding
    """
    verifier = _b64url(secrets.token_bytes(48))
    challenge = _b64url(sha256(verifier.encode("ascii")).digest())
    return verifier, challenge
