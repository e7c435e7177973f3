"""Infrastructure providers."""

# Import bases
from .clerk import ClerkProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .clerk import ProdClerkProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "ClerkProvider",
    "PersistenceProvider",
    "ProdClerkProvider",
    "ProdPersistenceProvider",
]
