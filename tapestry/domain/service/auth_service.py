"""Authentication domain service."""

import logfire

from tapestry.domain.value import IdentityAccount

from .base import Service


class IdentityClient:
    """Email/password account service interface."""

    async def sign_up(
        self, email: str, password: str, full_name: str | None = None
    ) -> IdentityAccount:
        """Register a new account.

        Args:
            email: Account email
            password: Plain password, sent to the identity service only
            full_name: Optional display name stored as account metadata

        Returns:
            The created account

        Raises:
            AuthenticationError: If the identity service rejects the sign-up
            ProviderError: If the identity service cannot be reached
        """
        raise NotImplementedError

    async def sign_in(self, email: str, password: str) -> IdentityAccount:
        """Check credentials of an existing account.

        Args:
            email: Account email
            password: Plain password

        Returns:
            The signed in account

        Raises:
            AuthenticationError: If the credentials are wrong
            ProviderError: If the identity service cannot be reached
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for account sign-up and sign-in."""

    def __init__(self, identity_client: IdentityClient) -> None:
        """Initialize auth service.

        Args:
            identity_client: Identity service client
        """
        self.identity_client = identity_client

    async def sign_up(
        self, email: str, password: str, full_name: str | None = None
    ) -> IdentityAccount:
        """Register a new account with the identity service."""
        with logfire.span("auth_service.sign_up"):
            account = await self.identity_client.sign_up(
                email.strip().lower(), password, full_name
            )
            logfire.info("Account created", user_id=account.user_id)
            return account

    async def sign_in(self, email: str, password: str) -> IdentityAccount:
        """Sign in with email and password."""
        with logfire.span("auth_service.sign_in"):
            account = await self.identity_client.sign_in(
                email.strip().lower(), password
            )
            logfire.info("Account signed in", user_id=account.user_id)
            return account
