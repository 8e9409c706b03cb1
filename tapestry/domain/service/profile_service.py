"""Profile domain service."""

from collections.abc import Iterable
from datetime import datetime, timezone

import logfire

from tapestry.domain.error import NotFoundError
from tapestry.domain.model import Profile
from tapestry.domain.repository import ProfileRepository
from tapestry.domain.value import UserId

from .base import Service


def display_name(user_id: str, full_name: str | None) -> str:
    """Name to render for an author.

    Falls back to ``User (<first 6 chars of id>)`` when the profile has no
    name or no profile exists.
    """
    if full_name and full_name.strip():
        return full_name
    return f"User ({user_id[:6]})"


class ProfileService(Service):
    """Domain service for profile operations."""

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_profile(self, user_id: UserId) -> Profile:
        """Get a profile by account ID.

        Args:
            user_id: Account ID

        Returns:
            Profile entity

        Raises:
            NotFoundError: If the account has no profile
        """
        with logfire.span("profile_service.get_profile", user_id=user_id):
            profile = await self.profile_repository.find_by_id(user_id)
            if not profile:
                logfire.warn("Profile not found", user_id=user_id)
                raise NotFoundError("Profile", user_id)
            return profile

    async def get_names(self, user_ids: Iterable[UserId]) -> dict[UserId, str | None]:
        """Look up the full names of a batch of authors.

        Only the distinct ids are queried. Authors without a profile are
        absent from the result, which callers read as "no name".

        Args:
            user_ids: Author IDs, duplicates allowed

        Returns:
            Mapping of user_id to full_name (which may itself be None)
        """
        distinct = list(dict.fromkeys(user_ids))
        with logfire.span("profile_service.get_names", count=len(distinct)):
            if not distinct:
                return {}
            profiles = await self.profile_repository.find_by_ids(distinct)
            names = {profile.id: profile.full_name for profile in profiles}
            logfire.debug(
                "Author names resolved",
                requested=len(distinct),
                found=len(names),
            )
            return names

    async def ensure_profile(
        self, user_id: UserId, email: str, full_name: str | None = None
    ) -> Profile:
        """Return the account's profile, creating it on first sign-in.

        An existing profile is returned untouched so names edited later are
        not overwritten by sign-up metadata.
        """
        existing = await self.profile_repository.find_by_id(user_id)
        if existing:
            return existing
        logfire.info("Creating missing profile", user_id=user_id)
        return await self.upsert_profile(user_id, full_name=full_name, email=email)

    async def upsert_profile(
        self,
        user_id: UserId,
        full_name: str | None = None,
        avatar_url: str | None = None,
        email: str | None = None,
    ) -> Profile:
        """Create the profile or update the given fields of an existing one.

        Fields passed as None keep their current value.

        Args:
            user_id: Account ID
            full_name: New display name
            avatar_url: New avatar URL
            email: New email

        Returns:
            Saved profile
        """
        with logfire.span("profile_service.upsert_profile", user_id=user_id):
            now = datetime.now(timezone.utc)
            existing = await self.profile_repository.find_by_id(user_id)

            if existing:
                updates: dict = {"updated_at": now}
                if full_name is not None:
                    updates["full_name"] = full_name
                if avatar_url is not None:
                    updates["avatar_url"] = avatar_url
                if email is not None:
                    updates["email"] = email
                profile = existing.model_copy(update=updates)
            else:
                profile = Profile(
                    id=user_id,
                    full_name=full_name,
                    avatar_url=avatar_url,
                    email=email,
                    created_at=now,
                    updated_at=now,
                )

            saved = await self.profile_repository.save(profile)
            logfire.info(
                "Profile saved", user_id=user_id, created=existing is None
            )
            return saved
