"""In-memory profile repository for testing."""

from typing import Optional

from humor.domain.model import Profile
from humor.domain.repository import ProfileRepository
from humor.domain.value import ProfileId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[ProfileId, Profile] = {}

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID."""
        return self._profiles.get(profile_id)

    async def save(self, profile: Profile) -> Profile:
        """Create or update a profile."""
        self._profiles[profile.id] = profile
        return profile
