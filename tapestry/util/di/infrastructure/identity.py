"""Identity service infrastructure providers."""

from dishka import Scope, provide

from tapestry.adapter.identity.client import RealIdentityClient
from tapestry.config import Settings
from tapestry.domain.service import IdentityClient
from tapestry.util.di.base import ProviderBase
from tapestry.util.error import ConfigurationError


class IdentityProvider(ProviderBase):
    """Identity component base."""

    __mock_component__ = "identity"


class ProdIdentityProvider(IdentityProvider):
    """Production identity provider using the hosted auth API."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_client(self, settings: Settings) -> IdentityClient:
        """Provide identity client.

        Raises:
            ConfigurationError: If the identity service is not configured
        """
        if not settings.identity.url:
            raise ConfigurationError("Identity service URL must be configured")
        if not settings.identity.anon_key:
            raise ConfigurationError("Identity service API key must be configured")

        return RealIdentityClient(
            base_url=settings.identity.url,
            anon_key=settings.identity.anon_key,
            timeout=settings.identity.timeout,
        )
