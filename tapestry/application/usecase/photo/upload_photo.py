"""Upload photo use case."""

from pydantic import BaseModel

from tapestry.domain.service import PhotoService
from tapestry.domain.value import UserId


class UploadPhotoRequest(BaseModel):
    """Upload photo request."""

    user_id: str  # Account ID from authenticated user
    filename: str | None
    content_type: str | None
    data: bytes


class UploadPhotoResponse(BaseModel):
    """Upload photo response."""

    url: str


class UploadPhotoUseCase:
    """Use case for attaching a photo to a post before it is created."""

    def __init__(self, photo_service: PhotoService) -> None:
        self.photo_service = photo_service

    async def execute(self, request: UploadPhotoRequest) -> UploadPhotoResponse:
        """Validate and store the photo.

        Raises:
            ValidationError: If the file is empty, too large or not an image
            ProviderError: If the storage service fails
        """
        url = await self.photo_service.upload_photo(
            user_id=UserId(request.user_id),
            data=request.data,
            content_type=request.content_type,
            filename=request.filename,
        )
        return UploadPhotoResponse(url=url)
