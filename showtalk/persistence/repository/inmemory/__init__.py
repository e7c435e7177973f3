"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .reaction import InMemoryReactionRepository
from .store import InMemoryStore
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryReactionRepository",
    "InMemoryStore",
    "InMemoryVoteRepository",
]
