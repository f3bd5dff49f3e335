"""Google sign-in and session cookie routes.

The session is a JWT in the HTTP-only ``auth_token`` cookie. The browser
only ever sees the redirect to Google and the redirect back home.
"""

import logging
import secrets

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from humor.adapter.error import ProviderError
from humor.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
)
from humor.config import Settings
from humor.domain.error import DomainError
from humor.domain.service import AuthService
from humor.domain.value import AuthProvider
from humor.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

AUTH_COOKIE = "auth_token"


class LoginStartRequest(BaseModel):
    provider: AuthProvider = AuthProvider.GOOGLE


class LoginStartResponse(BaseModel):
    authorization_url: str  # Where the frontend sends the browser next


class LogoutResponse(BaseModel):
    success: bool
    message: str


class SessionResponse(BaseModel):
    """Who is logged in, if anyone. Never an error."""

    authenticated: bool
    user: GetCurrentUserResponse | None = None


def _set_session_cookie(response: Response, token: str, settings: Settings) -> None:
    # Frontend and API live on different hosts in production, so the cookie
    # must be SameSite=None, which browsers only accept when Secure
    production = settings.environment == "production"
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        max_age=settings.auth.jwt_expiry_days * 86400,
        path="/",
        domain=settings.auth.cookie_domain,
        secure=production,
        httponly=True,
        samesite="none" if production else "lax",
    )


@router.post("/login", response_model=LoginStartResponse)
async def initiate_login(
    auth_service: FromDishka[AuthService],
    request: LoginStartRequest | None = None,
) -> LoginStartResponse:
    """Start sign-in and return the provider's consent page URL.

    The body may be omitted; Google is the default provider.
    """
    provider = (request or LoginStartRequest()).provider

    # Also keys the PKCE verifier the client keeps until the callback
    state = secrets.token_urlsafe(32)

    try:
        url = await auth_service.initiate_login(provider, state)
    except ProviderError as e:
        logger.error(f"Could not start {provider.value} login: {e}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"Failed to initiate login: {e}",
        ) from e

    logger.info(f"Started {provider.value} login")
    return LoginStartResponse(authorization_url=url)


@router.get("/callback")
async def oauth_callback(
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
) -> RedirectResponse:
    """Finish sign-in and send the browser home.

    The redirect goes to the frontend whatever happens. Only a successful
    login adds the session cookie to it.
    """
    home = RedirectResponse(settings.api.frontend_url, status.HTTP_302_FOUND)

    if not (code and state):
        logger.warning("Callback without code or state, ignoring")
        return home

    try:
        login = await login_use_case.execute(LoginRequest(code=code, state=state))
    except (ProviderError, DomainError) as e:
        logger.error(f"Login failed at callback: {e}")
        return home

    logger.info(f"Logged in user_id={login.user_id} new={login.is_new_user}")
    _set_session_cookie(home, login.token, settings)
    return home


@router.post("/logout", response_model=LogoutResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> LogoutResponse:
    """Drop the session cookie."""
    # Domain and path must match the ones it was set with
    response.delete_cookie(AUTH_COOKIE, path="/", domain=settings.auth.cookie_domain)
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=SessionResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> SessionResponse:
    """Return the logged-in profile.

    A missing, expired or forged cookie is reported as
    ``authenticated=false``. So is a token whose profile is gone.
    """
    if not auth_token:
        return SessionResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
    except (JWTError, DomainError):
        return SessionResponse(authenticated=False)
    return SessionResponse(authenticated=True, user=user)
