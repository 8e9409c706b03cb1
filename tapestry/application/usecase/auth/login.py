"""Login use case."""

from pydantic import BaseModel

from tapestry.domain.service import (
    AuthService,
    JWTService,
    ProfileService,
    display_name,
)
from tapestry.domain.value import UserId

from .signup import AuthResponse


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for signing in with email and password."""

    def __init__(
        self,
        auth_service: AuthService,
        jwt_service: JWTService,
        profile_service: ProfileService,
    ) -> None:
        """Initialize login use case.

        Args:
            auth_service: Auth domain service
            jwt_service: JWT token domain service
            profile_service: Profile domain service
        """
        self.auth_service = auth_service
        self.jwt_service = jwt_service
        self.profile_service = profile_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Steps:
        1. Check credentials with the identity service
        2. Make sure the profile exists (accounts created elsewhere)
        3. Issue a JWT token

        Raises:
            AuthenticationError: If the credentials are wrong
            ProviderError: If the identity service is unreachable
        """
        account = await self.auth_service.sign_in(request.email, request.password)

        profile = await self.profile_service.ensure_profile(
            UserId(account.user_id), email=account.email, full_name=account.full_name
        )
        token = self.jwt_service.create_token(account.user_id, account.email)

        return AuthResponse(
            user_id=account.user_id,
            email=account.email,
            full_name=profile.full_name,
            display_name=display_name(account.user_id, profile.full_name),
            token=token,
        )
