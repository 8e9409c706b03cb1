"""Hosted identity service adapter."""

from .client import (
    MockIdentityClient,
    RealIdentityClient,
    TapestryIdentityClient,
)

__all__ = ["TapestryIdentityClient", "RealIdentityClient", "MockIdentityClient"]
