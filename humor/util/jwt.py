"""Signed session tokens.

A token carries the profile ID as the ``sub`` claim plus the email the
identity provider reported, and expires after ``jwt_expiry_days``.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ConfigDict, Field

from humor.config import AuthSettings


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(alias="sub")
    email: str | None = None
    issued_at: datetime | None = Field(default=None, alias="iat")
    exp: datetime


class JWTError(Exception):
    """Token is malformed, forged or expired."""

    pass


def create_token(user_id: str, email: str | None, settings: AuthSettings) -> str:
    """Sign a session token for a profile.

    Args:
        user_id: Profile ID, stored as ``sub``
        email: Email reported by the identity provider
        settings: Secret, algorithm and lifetime

    Returns:
        Encoded token
    """
    now = datetime.now(timezone.utc)
    claims = {
        "sub": user_id,
        "email": email,
        "iat": now,
        "exp": now + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and return its claims.

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e
    return TokenPayload.model_validate(claims)
