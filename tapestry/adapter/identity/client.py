"""Identity service client.

Talks to a Supabase-style auth REST API (``/auth/v1``) for email/password
accounts. The API keeps credentials; Tapestry only keeps profiles.
"""

from uuid import uuid4

import httpx
import logfire

from tapestry.adapter.error import ProviderError
from tapestry.domain.error import AuthenticationError
from tapestry.domain.service.auth_service import IdentityClient
from tapestry.domain.value import IdentityAccount


class TapestryIdentityClient(IdentityClient):
    """Base class for identity clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealIdentityClient(TapestryIdentityClient):
    """Identity client backed by the hosted auth API."""

    def __init__(self, base_url: str, anon_key: str, timeout: float = 30.0) -> None:
        """Initialize identity client.

        Args:
            base_url: Project URL of the hosted service
            anon_key: Public API key sent with every request
            timeout: Request timeout in seconds
        """
        self.auth_url = f"{base_url.rstrip('/')}/auth/v1"
        self.anon_key = anon_key
        self.timeout = timeout

    async def sign_up(
        self, email: str, password: str, full_name: str | None = None
    ) -> IdentityAccount:
        """Register an account via ``POST /auth/v1/signup``."""
        payload: dict = {"email": email, "password": password}
        if full_name:
            payload["data"] = {"full_name": full_name}

        body = await self._post("/signup", payload, action="sign up")
        # Returns the bare user, or {user, session} when auto-confirm is on
        user = body.get("user") or body
        return self._to_account(user)

    async def sign_in(self, email: str, password: str) -> IdentityAccount:
        """Check credentials via ``POST /auth/v1/token?grant_type=password``."""
        body = await self._post(
            "/token",
            {"email": email, "password": password},
            action="sign in",
            params={"grant_type": "password"},
        )
        return self._to_account(body["user"])

    async def _post(
        self,
        path: str,
        payload: dict,
        action: str,
        params: dict | None = None,
    ) -> dict:
        """POST to the auth API and return the decoded body.

        Raises:
            AuthenticationError: On a 4xx answer (bad credentials, taken email)
            ProviderError: On transport errors and 5xx answers
        """
        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    f"{self.auth_url}{path}",
                    json=payload,
                    params=params,
                    headers={"apikey": self.anon_key},
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logfire.error("Identity service HTTP error", action=action, error=str(e))
            raise ProviderError(f"Identity service unreachable during {action}: {e}")

        if response.status_code >= 500:
            logfire.error(
                "Identity service failed",
                action=action,
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(
                f"Identity service error during {action}: {response.status_code}"
            )

        if response.status_code >= 400:
            message = self._error_message(response)
            logfire.warn(
                "Identity service rejected request",
                action=action,
                status_code=response.status_code,
                error=message,
            )
            raise AuthenticationError(message)

        return response.json()

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text or "Authentication failed"
        return (
            body.get("msg")
            or body.get("error_description")
            or body.get("message")
            or "Authentication failed"
        )

    @staticmethod
    def _to_account(user: dict) -> IdentityAccount:
        metadata = user.get("user_metadata") or {}
        return IdentityAccount(
            user_id=user["id"],
            email=user.get("email", ""),
            full_name=metadata.get("full_name"),
        )


class MockIdentityClient(TapestryIdentityClient):
    """In-memory identity client for tests and local development.

    Accounts live for the lifetime of the client instance.
    """

    def __init__(self) -> None:
        self._accounts: dict[str, tuple[IdentityAccount, str]] = {}

    async def sign_up(
        self, email: str, password: str, full_name: str | None = None
    ) -> IdentityAccount:
        if email in self._accounts:
            raise AuthenticationError("User already registered")
        if len(password) < 6:
            raise AuthenticationError("Password should be at least 6 characters")

        account = IdentityAccount(
            user_id=str(uuid4()), email=email, full_name=full_name
        )
        self._accounts[email] = (account, password)
        return account

    async def sign_in(self, email: str, password: str) -> IdentityAccount:
        stored = self._accounts.get(email)
        if not stored or stored[1] != password:
            raise AuthenticationError("Invalid login credentials")
        return stored[0]
