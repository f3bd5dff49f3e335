"""Session token domain service."""

from uuid import UUID

import logfire

from humor.config import AuthSettings
from humor.domain.model.session import AuthSession
from humor.domain.value import ProfileId
from humor.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues session tokens and turns them back into sessions."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, email: str | None) -> str:
        """Sign a session token for a profile."""
        token = create_token(user_id, email, self.auth_settings)
        logfire.info("Session token issued", user_id=user_id)
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify a session token.

        Raises:
            JWTError: If token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.info("Session token rejected", reason=str(e))
            raise

    def get_session(self, token: str | None) -> AuthSession | None:
        """Session for a cookie value, or None when logged out.

        A missing, expired or tampered token is the same as no session.
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return AuthSession(
                user_id=ProfileId(UUID(payload.user_id)), email=payload.email
            )
        except (JWTError, ValueError):
            return None
