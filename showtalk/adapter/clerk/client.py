"""Clerk identity provider client.

Fetches public user profiles (avatar URL) from the Clerk Backend API.
"""

import httpx
import logfire

from showtalk.adapter.error import IdentityLookupError
from showtalk.domain.service.author_service import IdentityProfile, IdentityProvider
from showtalk.domain.value import UserId


class ClerkIdentityProvider(IdentityProvider):
    """Identity provider backed by the Clerk Backend API."""

    def __init__(
        self,
        api_url: str,
        secret_key: str,
        timeout_seconds: float = 5.0,
    ) -> None:
        """Initialize Clerk client.

        Args:
            api_url: Clerk Backend API base URL
            secret_key: Clerk secret key (sent as bearer token)
            timeout_seconds: Per-request timeout
        """
        self.api_url = api_url.rstrip("/")
        self.secret_key = secret_key
        self.timeout_seconds = timeout_seconds

    async def get_profile(self, user_id: UserId) -> IdentityProfile:
        """Fetch a user's profile from Clerk.

        Args:
            user_id: Clerk user ID

        Returns:
            Profile with the user's image URL

        Raises:
            IdentityLookupError: If the request fails or Clerk rejects it
        """
        url = f"{self.api_url}/users/{user_id}"
        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(
                    url,
                    headers={"Authorization": f"Bearer {self.secret_key}"},
                    timeout=self.timeout_seconds,
                )
        except httpx.HTTPError as e:
            logfire.error("Clerk user lookup HTTP error", user_id=user_id, error=str(e))
            raise IdentityLookupError(user_id, f"HTTP error: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Clerk user lookup failed",
                user_id=user_id,
                status_code=response.status_code,
                error=response.text,
            )
            raise IdentityLookupError(user_id, f"status {response.status_code}")

        data = response.json()
        return IdentityProfile(user_id=user_id, image_url=data.get("image_url"))


class MockIdentityProvider(IdentityProvider):
    """Mock identity provider for testing.

    Returns registered avatars without network calls and records every
    lookup so tests can assert on deduplication.
    """

    def __init__(self) -> None:
        self.avatars: dict[UserId, str] = {}
        self.failing: set[UserId] = set()
        self.calls: list[UserId] = []

    def register(self, user_id: UserId, image_url: str) -> None:
        """Set the avatar returned for a user."""
        self.avatars[user_id] = image_url

    def fail_for(self, user_id: UserId) -> None:
        """Make lookups for a user raise."""
        self.failing.add(user_id)

    async def get_profile(self, user_id: UserId) -> IdentityProfile:
        """Return the registered profile for a user."""
        self.calls.append(user_id)
        if user_id in self.failing:
            raise IdentityLookupError(user_id, "mock failure")
        return IdentityProfile(user_id=user_id, image_url=self.avatars.get(user_id))
