"""Reaction entities.

Reactions are emoji-style annotations on comments. A user may attach several
distinct reaction types to the same comment, but never the same type twice.
"""

from typing import Optional

from pydantic import Field

from showtalk.domain.model.common import CreatedModel, DomainModel
from showtalk.domain.value import CommentId, ReactionId, ReactionTypeId, UserId


class ReactionType(DomainModel):
    """Catalog entry describing a kind of reaction."""

    id: ReactionTypeId
    name: str = Field(min_length=1, max_length=50)
    emoji: Optional[str] = None
    category: Optional[str] = None


class Reaction(CreatedModel):
    """A reaction left by a user on a comment."""

    id: ReactionId
    comment_id: CommentId
    user_id: UserId
    reaction_type: ReactionType
