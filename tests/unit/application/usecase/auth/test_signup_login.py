"""Unit tests for the sign-up, login and current user use cases."""

from dishka import AsyncContainer
import pytest

from tapestry.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    SignUpRequest,
    SignUpUseCase,
)
from tapestry.domain.error import AuthenticationError
from tapestry.domain.repository import ProfileRepository
from tapestry.domain.service import IdentityClient, JWTService
from tapestry.domain.value import UserId
from tapestry.util.jwt import JWTError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestSignUpUseCase:
    """Tests for SignUpUseCase."""

    @pytest.mark.asyncio
    async def test_signup_creates_profile_and_token(self, unit_env: AsyncContainer):
        """A new account gets a profile and a token for its id."""
        # Arrange
        use_case = await unit_env.get(SignUpUseCase)
        jwt_service = await unit_env.get(JWTService)
        profile_repo = await unit_env.get(ProfileRepository)

        # Act
        response = await use_case.execute(
            SignUpRequest(
                email=" Ada@Example.com ", password="secret1", full_name=" Ada "
            )
        )

        # Assert
        assert response.email == "ada@example.com"
        assert response.full_name == "Ada"
        assert response.display_name == "Ada"
        assert jwt_service.verify_token(response.token).user_id == response.user_id

        profile = await profile_repo.find_by_id(UserId(response.user_id))
        assert profile is not None
        assert profile.email == "ada@example.com"

    @pytest.mark.asyncio
    async def test_signup_without_name_uses_placeholder(self, unit_env):
        use_case = await unit_env.get(SignUpUseCase)

        response = await use_case.execute(
            SignUpRequest(email="anon@example.com", password="secret1")
        )

        assert response.full_name is None
        assert response.display_name == f"User ({response.user_id[:6]})"

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env):
        """The identity service refuses a second account per email."""
        use_case = await unit_env.get(SignUpUseCase)
        await use_case.execute(SignUpRequest(email="a@example.com", password="secret1"))

        with pytest.raises(AuthenticationError, match="already registered"):
            await use_case.execute(
                SignUpRequest(email="a@example.com", password="secret2")
            )


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_after_signup(self, unit_env):
        """Signing in returns the same account and its stored name."""
        signup = await unit_env.get(SignUpUseCase)
        login = await unit_env.get(LoginUseCase)
        created = await signup.execute(
            SignUpRequest(email="a@example.com", password="secret1", full_name="Ann")
        )

        response = await login.execute(
            LoginRequest(email="A@example.com", password="secret1")
        )

        assert response.user_id == created.user_id
        assert response.full_name == "Ann"

    @pytest.mark.asyncio
    async def test_login_creates_missing_profile(self, unit_env):
        """Accounts registered elsewhere get a profile on first login."""
        identity = await unit_env.get(IdentityClient)
        login = await unit_env.get(LoginUseCase)
        profile_repo = await unit_env.get(ProfileRepository)
        account = await identity.sign_up("b@example.com", "secret1", "Bea")

        response = await login.execute(
            LoginRequest(email="b@example.com", password="secret1")
        )

        assert response.full_name == "Bea"
        assert await profile_repo.find_by_id(UserId(account.user_id)) is not None

    @pytest.mark.asyncio
    async def test_wrong_password(self, unit_env):
        signup = await unit_env.get(SignUpUseCase)
        login = await unit_env.get(LoginUseCase)
        await signup.execute(SignUpRequest(email="a@example.com", password="secret1"))

        with pytest.raises(AuthenticationError, match="Invalid login credentials"):
            await login.execute(LoginRequest(email="a@example.com", password="nope"))


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_reads_profile_from_token(self, unit_env):
        signup = await unit_env.get(SignUpUseCase)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        created = await signup.execute(
            SignUpRequest(email="a@example.com", password="secret1", full_name="Ann")
        )

        response = await use_case.execute(GetCurrentUserRequest(token=created.token))

        assert response.user_id == created.user_id
        assert response.email == "a@example.com"
        assert response.display_name == "Ann"

    @pytest.mark.asyncio
    async def test_invalid_token(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(JWTError):
            await use_case.execute(GetCurrentUserRequest(token="not-a-jwt"))
