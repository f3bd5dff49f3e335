"""Login use case: finish the OAuth callback and issue a session."""

import logfire
from pydantic import BaseModel

from humor.domain.service import AuthService, JWTService, ProfileService
from humor.domain.value import AuthProvider


class LoginRequest(BaseModel):
    """Query parameters of the provider's redirect back to us."""

    provider: AuthProvider = AuthProvider.GOOGLE
    code: str
    state: str


class LoginResponse(BaseModel):
    """Session issued for the logged-in profile."""

    token: str
    user_id: str
    email: str | None
    is_new_user: bool


class LoginUseCase:
    """Turns a provider callback into a profile and a session token.

    The first login of a provider account creates its profile; later logins
    find the same profile again.
    """

    def __init__(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        profile_service: ProfileService,
    ) -> None:
        self.auth_service = auth_service
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Complete the login.

        Raises:
            ProviderError: If the code exchange or user info request fails
            StoreError: If the profile cannot be saved
        """
        identity = await self.auth_service.complete_login(
            request.provider, request.code, request.state
        )

        with logfire.span(
            "login",
            provider=identity.provider.value,
            provider_user_id=identity.provider_user_id,
        ):
            profile, created = await self.profile_service.get_or_create(identity)
            if created:
                logfire.info("First login, profile created", user_id=str(profile.id))

            return LoginResponse(
                token=self.jwt_service.create_token(str(profile.id), profile.email),
                user_id=str(profile.id),
                email=profile.email,
                is_new_user=created,
            )
