"""Photo storage infrastructure providers."""

from dishka import Scope, provide

from tapestry.adapter.storage.client import RealPhotoStorage
from tapestry.config import StorageSettings
from tapestry.domain.service import PhotoStorage
from tapestry.util.di.base import ProviderBase
from tapestry.util.error import ConfigurationError


class StorageProvider(ProviderBase):
    """Storage component base."""

    __mock_component__ = "storage"


class ProdStorageProvider(StorageProvider):
    """Production storage provider using the hosted storage API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_photo_storage(self, storage_settings: StorageSettings) -> PhotoStorage:
        """Provide photo storage.

        Raises:
            ConfigurationError: If the storage service is not configured
        """
        if not storage_settings.url or not storage_settings.service_key:
            raise ConfigurationError("Storage URL and service key must be configured")

        return RealPhotoStorage(
            base_url=storage_settings.url,
            service_key=storage_settings.service_key,
            bucket=storage_settings.bucket,
            timeout=storage_settings.timeout,
        )
