"""Update profile use case."""

from pydantic import BaseModel, Field

from tapestry.domain.service import ProfileService
from tapestry.domain.value import UserId

from .get_profile import ProfileResponse


class UpdateProfileRequest(BaseModel):
    """Update profile request.

    Fields left as None keep their stored value.
    """

    user_id: str  # Account ID from authenticated user
    full_name: str | None = Field(default=None, max_length=255)
    avatar_url: str | None = None
    email: str | None = Field(default=None, max_length=255)


class UpdateProfileUseCase:
    """Use case for editing one's own profile."""

    def __init__(self, profile_service: ProfileService) -> None:
        """Initialize update profile use case.

        Args:
            profile_service: Profile domain service
        """
        self.profile_service = profile_service

    async def execute(self, request: UpdateProfileRequest) -> ProfileResponse:
        """Execute update profile flow (upsert)."""
        full_name = request.full_name.strip() if request.full_name else None
        profile = await self.profile_service.upsert_profile(
            UserId(request.user_id),
            full_name=full_name,
            avatar_url=request.avatar_url,
            email=request.email,
        )
        return ProfileResponse.from_domain(profile)
