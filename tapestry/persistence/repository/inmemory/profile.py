"""In-memory profile repository for testing."""

from typing import Iterable, Optional

from tapestry.domain.model.profile import Profile
from tapestry.domain.repository.profile import ProfileRepository
from tapestry.domain.value import UserId


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, Profile] = {}
        # Number of find_by_ids calls, for batching assertions
        self.batch_lookups = 0

    async def find_by_id(self, user_id: UserId) -> Optional[Profile]:
        """Find a profile by account ID."""
        return self._profiles.get(user_id)

    async def find_by_ids(self, user_ids: Iterable[UserId]) -> list[Profile]:
        """Find the profiles of several accounts."""
        self.batch_lookups += 1
        return [
            self._profiles[user_id]
            for user_id in dict.fromkeys(user_ids)
            if user_id in self._profiles
        ]

    async def save(self, profile: Profile) -> Profile:
        """Insert or update a profile."""
        existing = self._profiles.get(profile.id)
        if existing:
            profile = profile.model_copy(update={"created_at": existing.created_at})
        self._profiles[profile.id] = profile
        return profile
