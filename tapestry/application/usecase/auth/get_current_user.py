"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from tapestry.domain.service import JWTService, ProfileService, display_name
from tapestry.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    email: str
    full_name: str | None
    display_name: str
    avatar_url: str | None
    created_at: datetime


class GetCurrentUserUseCase:
    """Use case for getting the signed in account."""

    def __init__(
        self, jwt_service: JWTService, profile_service: ProfileService
    ) -> None:
        """Initialize get current user use case.

        Args:
            jwt_service: JWT token domain service
            profile_service: Profile domain service
        """
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Raises:
            JWTError: If token is invalid or expired
            NotFoundError: If the account has no profile
        """
        payload = self.jwt_service.verify_token(request.token)
        profile = await self.profile_service.get_profile(UserId(payload.user_id))

        return GetCurrentUserResponse(
            user_id=profile.id,
            email=profile.email or payload.email,
            full_name=profile.full_name,
            display_name=display_name(profile.id, profile.full_name),
            avatar_url=profile.avatar_url,
            created_at=profile.created_at,
        )
