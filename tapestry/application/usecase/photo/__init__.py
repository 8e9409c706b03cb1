"""Photo use cases."""

from .upload_photo import UploadPhotoRequest, UploadPhotoResponse, UploadPhotoUseCase

__all__ = ["UploadPhotoRequest", "UploadPhotoResponse", "UploadPhotoUseCase"]
