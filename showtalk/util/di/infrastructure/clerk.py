"""Clerk infrastructure providers."""

from dishka import Scope, provide

from showtalk.adapter.clerk.client import ClerkIdentityProvider
from showtalk.config import Settings
from showtalk.domain.service import IdentityProvider
from showtalk.util.di.base import ProviderBase
from showtalk.util.error import ConfigurationError
from showtalk.util.observability import instrument_httpx

_UNSET_SECRET = "CHANGE_ME_IN_PRODUCTION"


class ClerkProvider(ProviderBase):
    """Clerk component base."""

    __mock_component__ = "clerk"


class ProdClerkProvider(ClerkProvider):
    """Production Clerk provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_identity_provider(self, settings: Settings) -> IdentityProvider:
        """Provide the Clerk-backed identity provider.

        Raises:
            ConfigurationError: If the Clerk secret key is not configured outside
                development and test
        """
        identity = settings.identity
        if settings.environment in ("staging", "production") and (
            not identity.secret_key or identity.secret_key == _UNSET_SECRET
        ):
            raise ConfigurationError("IDENTITY__SECRET_KEY must be configured")

        instrument_httpx()
        return ClerkIdentityProvider(
            api_url=identity.api_url,
            secret_key=identity.secret_key,
            timeout_seconds=identity.timeout_seconds,
        )
