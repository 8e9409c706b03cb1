"""Profile routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status
from pydantic import BaseModel, Field

from tapestry.application.usecase.profile import (
    GetProfileRequest,
    GetProfileUseCase,
    ProfileResponse,
    UpdateProfileRequest,
    UpdateProfileUseCase,
)
from tapestry.domain.error import NotFoundError
from tapestry.domain.service import JWTService

router = APIRouter(prefix="/profiles", tags=["profiles"], route_class=DishkaRoute)


class UpdateProfileAPIRequest(BaseModel):
    """API request for updating the own profile."""

    full_name: str | None = Field(default=None, max_length=255)
    avatar_url: str | None = None
    email: str | None = Field(default=None, max_length=255)


@router.patch("/me", response_model=ProfileResponse)
async def update_my_profile(
    request: UpdateProfileAPIRequest,
    update_profile_use_case: FromDishka[UpdateProfileUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ProfileResponse:
    """Update the signed in account's profile.

    Fields left out keep their current value.

    Raises:
        HTTPException: 401 if not authenticated
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated"
        )

    return await update_profile_use_case.execute(
        UpdateProfileRequest(
            user_id=user_id,
            full_name=request.full_name,
            avatar_url=request.avatar_url,
            email=request.email,
        )
    )


@router.get("/{user_id}", response_model=ProfileResponse)
async def get_profile(
    user_id: UUID,
    get_profile_use_case: FromDishka[GetProfileUseCase],
) -> ProfileResponse:
    """Get a public profile.

    Raises:
        HTTPException: 404 if the account has no profile
    """
    try:
        return await get_profile_use_case.execute(
            GetProfileRequest(user_id=str(user_id))
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
