"""Mock storage providers for testing."""

from dishka import Scope, provide

from tapestry.adapter.storage.client import MockPhotoStorage
from tapestry.config import StorageSettings
from tapestry.domain.service import PhotoStorage
from tapestry.util.di.infrastructure.storage import StorageProvider


class MockStorageProvider(StorageProvider):
    """Mock storage provider keeping photos in memory."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_photo_storage(self, storage_settings: StorageSettings) -> PhotoStorage:
        """Provide mock photo storage."""
        return MockPhotoStorage(bucket=storage_settings.bucket)
