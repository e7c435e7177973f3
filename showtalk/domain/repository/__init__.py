"""Repository interfaces for the showtalk domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from showtalk.domain.repository.comment import CommentRepository
from showtalk.domain.repository.reaction import ReactionRepository
from showtalk.domain.repository.vote import VoteRepository

__all__ = [
    "CommentRepository",
    "ReactionRepository",
    "VoteRepository",
]
