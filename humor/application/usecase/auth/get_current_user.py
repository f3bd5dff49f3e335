"""Get current user use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from humor.domain.service import JWTService, ProfileService
from humor.domain.value import ProfileId
from humor.util.jwt import JWTError


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # Value of the auth_token cookie


class GetCurrentUserResponse(BaseModel):
    """Profile of the logged-in user."""

    user_id: str
    email: str | None
    first_name: str | None
    last_name: str | None
    created_datetime_utc: datetime


class GetCurrentUserUseCase:
    """Resolves a session token to the profile behind it."""

    def __init__(self, jwt_service: JWTService, profile_service: ProfileService) -> None:
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Look up the profile a token was issued for.

        Raises:
            JWTError: If token is invalid or expired
            ProfileNotFoundError: If the profile is missing
        """
        payload = self.jwt_service.verify_token(request.token)
        try:
            profile_id = ProfileId(UUID(payload.user_id))
        except ValueError as e:
            raise JWTError("Invalid token") from e

        profile = await self.profile_service.get_by_id(profile_id)
        return GetCurrentUserResponse(
            user_id=str(profile.id),
            email=profile.email,
            first_name=profile.first_name,
            last_name=profile.last_name,
            created_datetime_utc=profile.created_datetime_utc,
        )
