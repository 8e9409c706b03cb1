"""Photo storage client.

Uploads post photos to a public bucket of a Supabase-style storage REST API
(``/storage/v1``).
"""

from urllib.parse import quote

import httpx
import logfire

from tapestry.adapter.error import ProviderError
from tapestry.domain.service.photo_service import PhotoStorage


class TapestryPhotoStorage(PhotoStorage):
    """Base class for photo storage backends.

    Provides type distinction for dependency injection.
    """

    pass


class RealPhotoStorage(TapestryPhotoStorage):
    """Photo storage backed by the hosted storage API."""

    def __init__(
        self, base_url: str, service_key: str, bucket: str, timeout: float = 30.0
    ) -> None:
        """Initialize storage client.

        Args:
            base_url: Project URL of the hosted service
            service_key: Key allowed to write to the bucket
            bucket: Public bucket holding the photos
            timeout: Request timeout in seconds
        """
        self.storage_url = f"{base_url.rstrip('/')}/storage/v1"
        self.service_key = service_key
        self.bucket = bucket
        self.timeout = timeout

    def public_url(self, name: str) -> str:
        """Public URL under which an object of the bucket is served."""
        return f"{self.storage_url}/object/public/{self.bucket}/{quote(name)}"

    async def upload(self, name: str, data: bytes, content_type: str) -> str:
        """Upload via ``POST /storage/v1/object/{bucket}/{name}``."""
        url = f"{self.storage_url}/object/{self.bucket}/{quote(name)}"
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    url,
                    content=data,
                    headers={
                        "Authorization": f"Bearer {self.service_key}",
                        "apikey": self.service_key,
                        "Content-Type": content_type,
                        "x-upsert": "false",
                    },
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Storage HTTP error", object_name=name, error=str(e))
            raise ProviderError(f"Storage service unreachable: {e}")

        if response.status_code not in (200, 201):
            logfire.error(
                "Storage upload failed",
                object_name=name,
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(f"Photo upload failed: {response.status_code}")

        return self.public_url(name)


class MockPhotoStorage(TapestryPhotoStorage):
    """In-memory photo storage for tests and local development."""

    def __init__(self, bucket: str = "photos") -> None:
        self.bucket = bucket
        self.objects: dict[str, tuple[bytes, str]] = {}

    async def upload(self, name: str, data: bytes, content_type: str) -> str:
        self.objects[name] = (data, content_type)
        return f"https://storage.example.com/object/public/{self.bucket}/{name}"
