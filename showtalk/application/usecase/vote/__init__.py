"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase, VoteTallyResponse
from .remove_vote import RemoveVoteRequest, RemoveVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "RemoveVoteRequest",
    "RemoveVoteUseCase",
    "VoteTallyResponse",
]
