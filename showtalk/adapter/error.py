"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class ProviderError(AdapterError):
    """External provider error."""

    pass


class IdentityLookupError(ProviderError):
    """A user profile could not be fetched from the identity provider."""

    def __init__(self, user_id: str, reason: str):
        self.user_id = user_id
        self.reason = reason
        super().__init__(f"Identity lookup failed for {user_id}: {reason}")
