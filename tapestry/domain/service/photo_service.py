"""Photo upload domain service."""

from datetime import datetime, timezone

import logfire

from tapestry.domain.error import ValidationError
from tapestry.domain.value import UserId

from .base import Service

ALLOWED_CONTENT_TYPES: dict[str, str] = {
    "image/jpeg": "jpg",
    "image/png": "png",
    "image/gif": "gif",
    "image/webp": "webp",
    "image/heic": "heic",
}


class PhotoStorage:
    """Public object storage interface for post photos."""

    async def upload(self, name: str, data: bytes, content_type: str) -> str:
        """Store an object and return its public URL.

        Args:
            name: Object name within the photo bucket
            data: Raw file contents
            content_type: MIME type stored with the object

        Returns:
            Public URL of the stored object

        Raises:
            ProviderError: If the storage service rejects or fails the upload
        """
        raise NotImplementedError


class PhotoService(Service):
    """Domain service for post photos."""

    def __init__(self, storage: PhotoStorage, max_upload_bytes: int) -> None:
        """Initialize photo service.

        Args:
            storage: Photo storage backend
            max_upload_bytes: Largest accepted file size
        """
        self.storage = storage
        self.max_upload_bytes = max_upload_bytes

    async def upload_photo(
        self,
        user_id: UserId,
        data: bytes,
        content_type: str | None,
        filename: str | None = None,
    ) -> str:
        """Validate and store a photo for a post.

        Objects are named ``{user_id}-{epoch millis}.{ext}`` so uploads of
        one account never collide.

        Args:
            user_id: Uploading account
            data: File contents
            content_type: Declared MIME type
            filename: Original file name, used for its extension

        Returns:
            Public URL of the photo

        Raises:
            ValidationError: If the file is empty, too large or not an image
        """
        with logfire.span(
            "photo_service.upload_photo",
            user_id=user_id,
            content_type=content_type,
            size=len(data),
        ):
            if not data:
                raise ValidationError("Photo is empty")
            if len(data) > self.max_upload_bytes:
                logfire.warn(
                    "Photo too large",
                    user_id=user_id,
                    size=len(data),
                    limit=self.max_upload_bytes,
                )
                raise ValidationError(
                    f"Photo exceeds {self.max_upload_bytes // (1024 * 1024)} MB"
                )
            if content_type not in ALLOWED_CONTENT_TYPES:
                raise ValidationError(f"Unsupported photo type: {content_type}")

            name = self.object_name(
                user_id, self._extension(filename, content_type)
            )
            url = await self.storage.upload(name, data, content_type)
            logfire.info("Photo uploaded", user_id=user_id, object_name=name)
            return url

    @staticmethod
    def object_name(
        user_id: UserId, extension: str, now: datetime | None = None
    ) -> str:
        """Build the storage object name for an upload."""
        moment = now or datetime.now(timezone.utc)
        return f"{user_id}-{int(moment.timestamp() * 1000)}.{extension}"

    @staticmethod
    def _extension(filename: str | None, content_type: str) -> str:
        if filename and "." in filename:
            ext = filename.rsplit(".", 1)[1].lower()
            if ext.isalnum():
                return ext
        return ALLOWED_CONTENT_TYPES[content_type]
