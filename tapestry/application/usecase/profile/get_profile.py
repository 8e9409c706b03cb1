"""Get profile use case."""

from datetime import datetime

from pydantic import BaseModel

from tapestry.domain.model import Profile
from tapestry.domain.service import ProfileService, display_name
from tapestry.domain.value import UserId


class ProfileResponse(BaseModel):
    """Profile response."""

    user_id: str
    full_name: str | None
    display_name: str
    avatar_url: str | None
    email: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, profile: Profile) -> "ProfileResponse":
        return cls(
            user_id=profile.id,
            full_name=profile.full_name,
            display_name=display_name(profile.id, profile.full_name),
            avatar_url=profile.avatar_url,
            email=profile.email,
            created_at=profile.created_at,
            updated_at=profile.updated_at,
        )


class GetProfileRequest(BaseModel):
    """Get profile request."""

    user_id: str


class GetProfileUseCase:
    """Use case for reading a public profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize get profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: GetProfileRequest) -> ProfileResponse:
        """Execute get profile flow.

        Raises:
            NotFoundError: If the account has no profile
        """
        profile = await self.profile_service.get_profile(UserId(request.user_id))
        return ProfileResponse.from_domain(profile)
