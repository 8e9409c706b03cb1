"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from tapestry.domain.model.profile import Profile
from tapestry.domain.value import UserId


class ProfileRepository(ABC):
    """Repository for Profile entity."""

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by account ID.

        Args:
            user_id: Account ID

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, user_ids: Iterable[UserId]) -> List[Profile]:
        """Find the profiles of several accounts in one query.

        Accounts without a profile are simply absent from the result.

        Args:
            user_ids: Account IDs

        Returns:
            Profiles found, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Insert or update a profile.

        Args:
            profile: The profile to save

        Returns:
            The saved profile
        """
        pass
