"""Reaction use cases."""

from .add_reaction import AddReactionRequest, AddReactionResponse, AddReactionUseCase
from .list_reaction_types import (
    ListReactionTypesResponse,
    ListReactionTypesUseCase,
    ReactionTypeItem,
)
from .remove_reaction import (
    RemoveReactionRequest,
    RemoveReactionResponse,
    RemoveReactionUseCase,
)

__all__ = [
    "AddReactionRequest",
    "AddReactionResponse",
    "AddReactionUseCase",
    "ListReactionTypesResponse",
    "ListReactionTypesUseCase",
    "ReactionTypeItem",
    "RemoveReactionRequest",
    "RemoveReactionResponse",
    "RemoveReactionUseCase",
]
