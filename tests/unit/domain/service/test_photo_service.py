"""Unit tests for PhotoService."""

from datetime import datetime, timezone

import pytest

from tapestry.domain.error import ValidationError
from tapestry.domain.service import PhotoService, PhotoStorage
from tapestry.domain.value import UserId
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 32


class TestUploadPhoto:
    """Tests for upload_photo method."""

    @pytest.mark.asyncio
    async def test_upload_returns_public_url(self, unit_env):
        """Valid images are stored under the account's name prefix."""
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)

        url = await photo_service.upload_photo(
            UserId("alice"), PNG_BYTES, "image/png", filename="garden.PNG"
        )

        (name,) = storage.objects
        assert name.startswith("alice-")
        assert name.endswith(".png")
        assert url.endswith(f"/{name}")
        assert storage.objects[name] == (PNG_BYTES, "image/png")

    @pytest.mark.asyncio
    async def test_extension_from_content_type(self, unit_env):
        """Without a usable filename the extension follows the MIME type."""
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)

        await photo_service.upload_photo(UserId("alice"), PNG_BYTES, "image/jpeg")

        (name,) = storage.objects
        assert name.endswith(".jpg")

    @pytest.mark.asyncio
    async def test_rejects_empty_file(self, unit_env):
        photo_service = await unit_env.get(PhotoService)

        with pytest.raises(ValidationError, match="empty"):
            await photo_service.upload_photo(UserId("alice"), b"", "image/png")

    @pytest.mark.asyncio
    async def test_rejects_non_image(self, unit_env):
        photo_service = await unit_env.get(PhotoService)

        with pytest.raises(ValidationError, match="Unsupported"):
            await photo_service.upload_photo(
                UserId("alice"), b"%PDF-1.7", "application/pdf"
            )

    @pytest.mark.asyncio
    async def test_rejects_oversized_file(self, unit_env):
        """Files above the configured limit never reach storage."""
        photo_service = await unit_env.get(PhotoService)
        storage = await unit_env.get(PhotoStorage)
        too_big = b"\x00" * (photo_service.max_upload_bytes + 1)

        with pytest.raises(ValidationError, match="exceeds"):
            await photo_service.upload_photo(UserId("alice"), too_big, "image/png")

        assert storage.objects == {}


def test_object_name_uses_epoch_millis():
    """Object names are <user>-<milliseconds>.<ext>."""
    moment = datetime(2024, 5, 1, 12, 0, 0, 250000, tzinfo=timezone.utc)

    name = PhotoService.object_name(UserId("alice"), "webp", now=moment)

    assert name == f"alice-{int(moment.timestamp() * 1000)}.webp"
