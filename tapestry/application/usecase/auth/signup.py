"""Sign-up use case."""

from pydantic import BaseModel, Field

from tapestry.domain.service import (
    AuthService,
    JWTService,
    ProfileService,
    display_name,
)
from tapestry.domain.value import UserId


class SignUpRequest(BaseModel):
    """Sign-up request."""

    email: str = Field(min_length=3, max_length=255)
    password: str = Field(min_length=6)
    full_name: str | None = Field(default=None, max_length=255)


class AuthResponse(BaseModel):
    """Sign-up and login response."""

    user_id: str
    email: str
    full_name: str | None
    display_name: str
    token: str  # JWT token for the session cookie


class SignUpUseCase:
    """Use case for creating an account."""

    def __init__(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize sign-up use case.

        Args:
            auth_service: Auth domain service
            jwt_service: JWT token domain service
            profile_service: Profile domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: SignUpRequest) -> AuthResponse:
        """Execute sign-up flow.

        Steps:
        1. Register the account with the identity service
        2. Create the profile
        3. Issue a JWT token

        Raises:
            AuthenticationError: If the identity service rejects the sign-up
            ProviderError: If the identity service is unreachable
        """
        full_name = request.full_name.strip() if request.full_name else None
        account = await self.auth_service.sign_up(
            request.email, request.password, full_name or None
        )

        profile = await self.profile_service.upsert_profile(
            UserId(account.user_id),
            full_name=full_name or account.full_name,
            email=account.email,
        )
        token = self.jwt_service.create_token(account.user_id, account.email)

        return AuthResponse(
            user_id=account.user_id,
            email=account.email,
            full_name=profile.full_name,
            display_name=display_name(account.user_id, profile.full_name),
            token=token,
        )
