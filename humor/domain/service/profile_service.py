"""Profile domain service."""

from uuid import NAMESPACE_URL, uuid5

import logfire
from sqlalchemy.exc import SQLAlchemyError

from humor.domain.error import ProfileNotFoundError, StoreError
from humor.domain.model import Profile
from humor.domain.repository import ProfileRepository
from humor.domain.value import OAuthProviderInfo, ProfileId

from .base import Service


def profile_id_for(provider_info: OAuthProviderInfo) -> ProfileId:
    """Stable profile ID for a provider account.

    The same provider subject always maps to the same UUID, so logging in
    twice finds the profile created the first time.
    """
    subject = f"{provider_info.provider.value}:{provider_info.provider_user_id}"
    return ProfileId(uuid5(NAMESPACE_URL, subject))


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_id(self, profile_id: ProfileId) -> Profile:
        """Get profile by ID.

        Args:
            profile_id: Profile ID

        Returns:
            Profile entity

        Raises:
            ProfileNotFoundError: If the profile is missing or cannot be read
        """
        with logfire.span("profile_service.get_by_id", profile_id=str(profile_id)):
            try:
                profile = await self.profile_repository.find_by_id(profile_id)
            except SQLAlchemyError as e:
                logfire.error(
                    "Profile lookup failed", profile_id=str(profile_id), error=str(e)
                )
                raise ProfileNotFoundError(str(profile_id)) from e
            if not profile:
                logfire.warn("Profile not found", profile_id=str(profile_id))
                raise ProfileNotFoundError(str(profile_id))
            return profile

    async def get_or_create(
        self, provider_info: OAuthProviderInfo
    ) -> tuple[Profile, bool]:
        """Find the profile for a provider account, creating it on first login.

        Args:
            provider_info: Identity returned by the OAuth provider

        Returns:
            Tuple of (profile, whether it was created by this call)

        Raises:
            StoreError: If the profile cannot be read or written
        """
        profile_id = profile_id_for(provider_info)
        with logfire.span("profile_service.get_or_create", profile_id=str(profile_id)):
            try:
                existing = await self.profile_repository.find_by_id(profile_id)
                if existing:
                    logfire.info("Existing profile found", profile_id=str(profile_id))
                    return existing, False

                profile = Profile(
                    id=profile_id,
                    email=provider_info.email,
                    first_name=provider_info.first_name,
                    last_name=provider_info.last_name,
                )
                saved = await self.profile_repository.save(profile)
            except SQLAlchemyError as e:
                logfire.error("Profile upsert failed", error=str(e))
                raise StoreError("Could not save user profile") from e

            logfire.info("Profile created", profile_id=str(profile_id))
            return saved, True
