"""Mock providers for testing."""

from .identity import MockIdentityProvider
from .persistence import MockPersistenceProvider
from .storage import MockStorageProvider
from .container import build_test_container

__all__ = [
    "MockIdentityProvider",
    "MockPersistenceProvider",
    "MockStorageProvider",
    "build_test_container",
]
