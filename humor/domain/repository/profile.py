"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from humor.domain.model.profile import Profile
from humor.domain.value import ProfileId


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID.

        Args:
            profile_id: The profile's unique identifier (same as the user ID)

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Create or update a profile.

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass
