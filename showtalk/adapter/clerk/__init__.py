"""Clerk identity adapter."""

from .client import ClerkIdentityProvider, MockIdentityProvider

__all__ = ["ClerkIdentityProvider", "MockIdentityProvider"]
