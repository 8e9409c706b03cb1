"""Authentication routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from pydantic import BaseModel

from tapestry.application.usecase.auth import (
    AuthResponse,
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
    LoginRequest,
    LoginUseCase,
    SignUpRequest,
    SignUpUseCase,
)
from tapestry.config import Settings
from tapestry.domain.error import AuthenticationError, NotFoundError
from tapestry.util.jwt import JWTError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"], route_class=DishkaRoute)


class AuthStatusResponse(BaseModel):
    """Authentication status response."""

    authenticated: bool
    user: GetCurrentUserResponse | None = None


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def _set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session JWT as an httponly cookie."""
    response.set_cookie(
        key="auth_token",
        value=token,
        httponly=True,
        secure=settings.auth.cookie_secure,
        samesite="lax",
        domain=settings.auth.cookie_domain,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


@router.post(
    "/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED
)
async def signup(
    request: SignUpRequest,
    response: Response,
    signup_use_case: FromDishka[SignUpUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Create an account and start a session.

    Args:
        request: Email, password and optional full name
        response: FastAPI response object, receives the auth cookie
        signup_use_case: Sign-up use case from DI
        settings: Application settings from DI

    Returns:
        The new account with its session token

    Raises:
        HTTPException: 400 if the identity service rejects the sign-up
    """
    try:
        result = await signup_use_case.execute(request)
    except AuthenticationError as e:
        logger.info(f"Sign-up rejected: {e}")
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    _set_auth_cookie(response, result.token, settings)
    logger.info(f"Account created: {result.user_id}")
    return result


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> AuthResponse:
    """Sign in with email and password.

    Raises:
        HTTPException: 401 if the credentials are wrong
    """
    try:
        result = await login_use_case.execute(request)
    except AuthenticationError as e:
        logger.info(f"Login rejected: {e}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    _set_auth_cookie(response, result.token, settings)
    return result


@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Logout user by clearing authentication cookie."""
    # Same domain/path as when it was set
    response.delete_cookie(
        key="auth_token",
        domain=settings.auth.cookie_domain,
        path="/",
    )
    return LogoutResponse(success=True, message="Successfully logged out")


@router.get("/me", response_model=AuthStatusResponse)
async def get_current_user(
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
    auth_token: str | None = Cookie(default=None),
) -> AuthStatusResponse:
    """Get current user if authenticated, or return unauthenticated status.

    Safe to call without a session: returns ``authenticated: false`` instead
    of an error so the client can check its state quietly.
    """
    if not auth_token:
        return AuthStatusResponse(authenticated=False)

    try:
        user = await get_current_user_use_case.execute(
            GetCurrentUserRequest(token=auth_token)
        )
        return AuthStatusResponse(authenticated=True, user=user)

    except JWTError:
        return AuthStatusResponse(authenticated=False)
    except NotFoundError:
        # Valid token but no profile (orphaned token)
        return AuthStatusResponse(authenticated=False)
