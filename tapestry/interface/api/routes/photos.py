"""Photo upload routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, File, HTTPException, UploadFile, status

from tapestry.application.usecase.photo import (
    UploadPhotoRequest,
    UploadPhotoResponse,
    UploadPhotoUseCase,
)
from tapestry.domain.error import ValidationError
from tapestry.domain.service import JWTService

router = APIRouter(prefix="/photos", tags=["photos"], route_class=DishkaRoute)


@router.post("", response_model=UploadPhotoResponse, status_code=status.HTTP_201_CREATED)
async def upload_photo(
    upload_photo_use_case: FromDishka[UploadPhotoUseCase],
    jwt_service: FromDishka[JWTService],
    file: UploadFile = File(...),
    auth_token: str | None = Cookie(default=None),
) -> UploadPhotoResponse:
    """Upload a photo to attach to a post.

    Requires authentication. The returned URL goes into ``photo_url`` of the
    create post request.

    Raises:
        HTTPException: 401 if not authenticated, 400 if the file is rejected
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to upload photos",
        )

    data = await file.read()
    try:
        return await upload_photo_use_case.execute(
            UploadPhotoRequest(
                user_id=user_id,
                filename=file.filename,
                content_type=file.content_type,
                data=data,
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
